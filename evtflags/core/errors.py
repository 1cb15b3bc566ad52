"""Errors raised while parsing event flags.

Every error carries enough context for the CLI to report it verbatim,
so the user can fix the offending command-line option.
"""


class EventFlagError(ValueError):
    """Base class for all event flag parsing errors."""


class EmptyFlagError(EventFlagError):
    """Raised when an event flag is the empty string."""

    def __init__(self) -> None:
        super().__init__("flag cannot be empty")


class InvalidFilterFlagFormatError(EventFlagError):
    """Raised when an event flag violates the filter grammar.

    Attributes:
        flag: The complete original flag text, never a sub-fragment of it.
    """

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"invalid filter flag format: {flag}")
