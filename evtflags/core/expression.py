"""Splitting of dotted filter expressions.

A filter expression is the part of an event flag before any operator:
    openat.scope.processName   → event, category and field
    security_file_open.scope.container
    open.retval                → event and category only
"""

from __future__ import annotations

from dataclasses import dataclass

from evtflags.core.errors import InvalidFilterFlagFormatError
from evtflags.core.validation import has_leading_or_trailing_whitespace, is_empty


@dataclass(frozen=True)
class FilterExpressionParts:
    """Components of a dotted filter expression.

    Attributes:
        event_name: Leading segment, the event (or set) name.
        option_category: Second segment, e.g. "scope", "data" or "retval".
        option_field: Third segment, or "" when the expression has only two.
    """

    event_name: str
    option_category: str
    option_field: str = ""


def split_filter_expression(expression: str, flag: str) -> FilterExpressionParts:
    """Split a dotted filter expression into its parts, validating them.

    Valid forms are "name.category" and "name.category.field". Every
    segment must be non-empty and free of leading or trailing whitespace.

    Args:
        expression: The dotted expression (the flag up to its operator).
        flag: The complete original flag, used in error messages.

    Returns:
        FilterExpressionParts with the event name, category and field.

    Raises:
        InvalidFilterFlagFormatError: If the expression is malformed.
    """
    segments = expression.split(".")
    if len(segments) not in (2, 3):
        raise InvalidFilterFlagFormatError(flag)

    if any(is_empty(s) or has_leading_or_trailing_whitespace(s) for s in segments):
        raise InvalidFilterFlagFormatError(flag)

    if len(segments) == 3:
        return FilterExpressionParts(*segments)
    return FilterExpressionParts(segments[0], segments[1])
