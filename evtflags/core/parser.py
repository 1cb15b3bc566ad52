"""Parser for the --events flag grammar.

Each raw flag is turned into one or more FilterDescriptor entries:
    execve,open                  → two plain event selections
    -open,-openat                → two excluded events
    security_file_open.scope.container
                                 → filter without an operator
    openat.data.pathname!=/tmp/1,/bin/ls
                                 → filter with operator and values

All flags are collected, in order, into the default policy.
"""

from __future__ import annotations

import logging
from typing import Iterable

from evtflags.core.errors import EmptyFlagError, InvalidFilterFlagFormatError
from evtflags.core.expression import split_filter_expression
from evtflags.core.operators import extract_operator_and_values, find_operator
from evtflags.core.validation import has_leading_or_trailing_whitespace, is_empty
from evtflags.models.descriptor import (
    DEFAULT_POLICY_ID,
    FilterDescriptor,
    PolicyFilterMap,
    PolicyFilterSet,
)

logger = logging.getLogger(__name__)


class EventFlagParser:
    """Parser turning raw --events flags into a policy filter map.

    The parser holds no state between calls; the same input always
    produces the same descriptors or the same error.

    Example usage:
        parser = EventFlagParser()
        policies = parser.parse_all(["fs", "-open,-openat"])
        policies[0].filters[1].event_name  # "open"
    """

    def parse_all(self, flags: Iterable[str]) -> PolicyFilterMap:
        """Parse all flags into a map holding the default policy.

        Flags are parsed in order and parsing stops at the first invalid
        flag; no partial map is returned.

        Args:
            flags: Raw flag strings, one per --events occurrence.

        Returns:
            Mapping with a single entry, policy id 0, holding every
            descriptor in flag order.

        Raises:
            EventFlagError: For the first flag that fails to parse.
        """
        descriptors: list[FilterDescriptor] = []
        for flag in flags:
            descriptors.extend(self.parse_flag(flag))

        logger.debug("Parsed %d event filter(s)", len(descriptors))
        return {
            DEFAULT_POLICY_ID: PolicyFilterSet(
                policy_id=DEFAULT_POLICY_ID,
                filters=tuple(descriptors),
            )
        }

    def parse_flag(self, flag: str) -> list[FilterDescriptor]:
        """Parse a single flag into its descriptors.

        Args:
            flag: One raw flag string.

        Returns:
            Descriptors in the order they appear in the flag. A comma list
            of event names yields one descriptor per name.

        Raises:
            EmptyFlagError: If the flag is empty.
            InvalidFilterFlagFormatError: If the flag is malformed.
        """
        if is_empty(flag):
            raise EmptyFlagError()

        operator_idx = find_operator(flag)
        if operator_idx == -1:
            if "." in flag:
                descriptors = [self._parse_bare_filter(flag)]
            else:
                descriptors = self._parse_event_names(flag)
        else:
            descriptors = [self._parse_filter(flag, operator_idx)]

        logger.debug("Flag %r -> %d descriptor(s)", flag, len(descriptors))
        return descriptors

    def _parse_bare_filter(self, flag: str) -> FilterDescriptor:
        """Parse a dotted filter with no operator, e.g. "x.scope.container"."""
        parts = split_filter_expression(flag, flag)
        return FilterDescriptor(
            full=flag,
            filter_expression=flag,
            event_name=parts.event_name,
            option_category=parts.option_category,
            option_field=parts.option_field,
        )

    def _parse_event_names(self, flag: str) -> list[FilterDescriptor]:
        """Parse a comma list of event (or set) names.

        A name starting with "-" excludes that event.
        """
        descriptors: list[FilterDescriptor] = []
        for token in flag.split(","):
            if is_empty(token) or has_leading_or_trailing_whitespace(token):
                raise InvalidFilterFlagFormatError(flag)

            if token.startswith("-"):
                name = token[1:]
                if is_empty(name) or has_leading_or_trailing_whitespace(name):
                    raise InvalidFilterFlagFormatError(flag)
                descriptors.append(
                    FilterDescriptor(full=token, event_name=name, operator="-")
                )
                continue

            descriptors.append(FilterDescriptor(full=token, event_name=token))

        return descriptors

    def _parse_filter(self, flag: str, operator_idx: int) -> FilterDescriptor:
        """Parse a filter with an operator, e.g. "close.data.fd=5"."""
        expression = flag[:operator_idx]
        parts = split_filter_expression(expression, flag)
        op_parts = extract_operator_and_values(flag, operator_idx)

        return FilterDescriptor(
            full=flag,                                         # "openat.data.pathname=/etc/*"
            filter_expression=expression,                      # "openat.data.pathname"
            event_name=parts.event_name,                       # "openat"
            option_category=parts.option_category,             # "data"
            option_field=parts.option_field,                   # "pathname"
            operator=op_parts.operator,                        # "="
            values=op_parts.values,                            # "/etc/*"
            operator_and_values=op_parts.operator_and_values,  # "=/etc/*"
            residual_filter=flag[len(parts.event_name) + 1:],  # "data.pathname=/etc/*"
        )


def parse_event_flag(flag: str) -> list[FilterDescriptor]:
    """Parse a single raw flag. See EventFlagParser.parse_flag."""
    return EventFlagParser().parse_flag(flag)


def prepare_policy_map(flags: Iterable[str]) -> PolicyFilterMap:
    """Parse raw flags into the default policy. See EventFlagParser.parse_all."""
    return EventFlagParser().parse_all(flags)
