"""Shared predicates used to reject malformed flag tokens early."""

from __future__ import annotations

# str.isspace() also accepts the ASCII file, group, record and unit
# separators, which are control characters rather than padding.
_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_empty(token: str) -> bool:
    """Return True if the token has no characters at all."""
    return token == ""


def _is_space(char: str) -> bool:
    return char.isspace() and char not in _SEPARATORS


def has_leading_or_trailing_whitespace(token: str) -> bool:
    """Return True if the token starts or ends with whitespace.

    Tokens are never trimmed: the grammar requires exact, unpadded text.
    """
    if is_empty(token):
        return False
    return _is_space(token[0]) or _is_space(token[-1])
