"""FilterDescriptor and policy data models for evtflags.

A FilterDescriptor is the parsed form of one event selection or filter.
Descriptors are grouped into a PolicyFilterSet, and policies are keyed by
id in a PolicyFilterMap handed to the policy engine.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

Operator = Literal["", "-", "=", "!=", "<", ">", "<=", ">="]

DEFAULT_POLICY_ID = 0

# Operators that never carry values.
_VALUELESS_OPERATORS = ("", "-")


class FilterDescriptor(BaseModel):
    """A single parsed event selection or filter.

    Attributes:
        full: Original flag text (or the sub-token of a comma list).
        filter_expression: Dotted path before any operator, e.g.
            "openat.data.pathname". Empty for plain event names.
        event_name: Event or set name. Never empty.
        option_category: "scope", "data", "retval" or "" for plain names.
        option_field: Field within the category, or "".
        operator: Comparison operator, "-" for an excluded event, or ""
            when there is none.
        values: Raw value text after the operator, e.g. "/tmp/1,/bin/ls".
        operator_and_values: Verbatim flag text from the operator onward.
        residual_filter: The filter with the event name stripped, e.g.
            "data.pathname=/etc/*".
    """

    model_config = ConfigDict(frozen=True)

    full: str
    event_name: str = Field(min_length=1)
    filter_expression: str = ""
    option_category: str = ""
    option_field: str = ""
    operator: Operator = ""
    values: str = ""
    operator_and_values: str = ""
    residual_filter: str = ""

    @model_validator(mode="after")
    def check_consistency(self) -> "FilterDescriptor":
        """Reject field combinations the grammar cannot produce."""
        if self.operator in _VALUELESS_OPERATORS and (
            self.values or self.operator_and_values
        ):
            raise ValueError("values given without a comparison operator")
        if not self.option_category and self.option_field:
            raise ValueError("option field given without an option category")
        return self

    @property
    def is_exclusion(self) -> bool:
        """True if this descriptor removes an event from the selection."""
        return self.operator == "-"

    @property
    def has_filter(self) -> bool:
        """True if this descriptor refines an event rather than naming it."""
        return bool(self.option_category)

    def value_list(self) -> list[str]:
        """Split the raw values on commas.

        Returns an empty list when there are no values.
        """
        if not self.values:
            return []
        return self.values.split(",")

    def to_dict(self) -> dict[str, str]:
        """Return the descriptor as a plain dictionary."""
        return self.model_dump()


class PolicyFilterSet(BaseModel):
    """Ordered filter descriptors belonging to one policy.

    Order mirrors the order flags were given; the policy engine relies on
    it for exclusion-after-inclusion semantics.
    """

    model_config = ConfigDict(frozen=True)

    policy_id: int = DEFAULT_POLICY_ID
    name: str = ""
    filters: tuple[FilterDescriptor, ...] = ()


PolicyFilterMap = dict[int, PolicyFilterSet]
