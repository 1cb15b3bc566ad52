"""Extraction of the comparison operator and values from an event flag."""

from __future__ import annotations

from dataclasses import dataclass

from evtflags.core.errors import InvalidFilterFlagFormatError

# Characters that may start an operator, in the order flags are scanned.
OPERATOR_CHARS = "=!<>"

# Operator prefixes that combine with a following "=".
_DOUBLE_PREFIXES = ("!", "<", ">")

OPERATORS = ("=", "!=", "<", ">", "<=", ">=")


@dataclass(frozen=True)
class OperatorValueParts:
    """Operator token and values split out of a flag.

    Attributes:
        operator: One of "=", "!=", "<", ">", "<=", ">=".
        values: Raw text after the operator, possibly comma separated
            and possibly empty.
        operator_and_values: Verbatim flag text from the operator onward.
    """

    operator: str
    values: str
    operator_and_values: str


def find_operator(flag: str) -> int:
    """Return the index of the first operator character in flag, or -1."""
    for idx, char in enumerate(flag):
        if char in OPERATOR_CHARS:
            return idx
    return -1


def extract_operator_and_values(flag: str, operator_idx: int) -> OperatorValueParts:
    """Determine the exact operator token starting at operator_idx.

    The operator scan only locates the first operator character, so the
    next character is peeked to tell "<" from "<=" and ">" from ">=".
    A "!" is only valid as part of "!=".

    Values are not checked for emptiness here; "open.retval=" is
    syntactically legal and left for the evaluation stage to reject.

    Args:
        flag: The complete original flag.
        operator_idx: Index of the first operator character in flag.

    Returns:
        OperatorValueParts for the flag.

    Raises:
        InvalidFilterFlagFormatError: If the operator is malformed or
            operator_idx does not point at an operator character.
    """
    if operator_idx < 0 or operator_idx >= len(flag):
        raise InvalidFilterFlagFormatError(flag)

    first = flag[operator_idx]
    if first not in OPERATOR_CHARS:
        raise InvalidFilterFlagFormatError(flag)

    end = operator_idx + 1
    if first in _DOUBLE_PREFIXES and flag[end:end + 1] == "=":
        end += 1

    operator = flag[operator_idx:end]
    if operator not in OPERATORS:
        # bare "!"
        raise InvalidFilterFlagFormatError(flag)

    return OperatorValueParts(
        operator=operator,
        values=flag[end:],
        operator_and_values=flag[operator_idx:],
    )
