"""Core logic for evtflags.

This module provides the core functionality:
- EventFlagParser: Parsing of --events flags into a policy filter map
- split_filter_expression: Dotted filter expression splitting
- extract_operator_and_values: Operator token and value extraction
- ConfigLoader: Configuration file loading
- events_help: Help text for the --events grammar
"""

from evtflags.core.config import (
    Config,
    ConfigError,
    ConfigLoader,
    EventsConfig,
    OutputConfig,
)
from evtflags.core.errors import (
    EmptyFlagError,
    EventFlagError,
    InvalidFilterFlagFormatError,
)
from evtflags.core.expression import FilterExpressionParts, split_filter_expression
from evtflags.core.help import events_help
from evtflags.core.operators import (
    OperatorValueParts,
    extract_operator_and_values,
    find_operator,
)
from evtflags.core.parser import EventFlagParser, parse_event_flag, prepare_policy_map

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoader",
    "EmptyFlagError",
    "EventFlagError",
    "EventFlagParser",
    "EventsConfig",
    "FilterExpressionParts",
    "InvalidFilterFlagFormatError",
    "OperatorValueParts",
    "OutputConfig",
    "events_help",
    "extract_operator_and_values",
    "find_operator",
    "parse_event_flag",
    "prepare_policy_map",
    "split_filter_expression",
]
