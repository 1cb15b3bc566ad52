"""Data models for evtflags."""

from evtflags.models.descriptor import (
    DEFAULT_POLICY_ID,
    FilterDescriptor,
    Operator,
    PolicyFilterMap,
    PolicyFilterSet,
)

__all__ = [
    "DEFAULT_POLICY_ID",
    "FilterDescriptor",
    "Operator",
    "PolicyFilterMap",
    "PolicyFilterSet",
]
