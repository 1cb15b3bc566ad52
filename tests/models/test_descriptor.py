"""Tests for FilterDescriptor and policy models."""

import pytest
from pydantic import ValidationError

from evtflags.models.descriptor import FilterDescriptor, PolicyFilterSet


def test_minimal_descriptor():
    d = FilterDescriptor(full="execve", event_name="execve")
    assert d.filter_expression == ""
    assert d.option_category == ""
    assert d.option_field == ""
    assert d.operator == ""
    assert d.values == ""
    assert d.operator_and_values == ""
    assert d.residual_filter == ""
    assert d.is_exclusion is False
    assert d.has_filter is False


def test_empty_event_name_rejected():
    with pytest.raises(ValidationError):
        FilterDescriptor(full="", event_name="")


def test_unknown_operator_rejected():
    with pytest.raises(ValidationError):
        FilterDescriptor(full="a.b==1", event_name="a", option_category="b", operator="==")


def test_values_require_operator():
    with pytest.raises(ValidationError):
        FilterDescriptor(full="a", event_name="a", values="1")


def test_exclusion_has_no_values():
    with pytest.raises(ValidationError):
        FilterDescriptor(full="-a", event_name="a", operator="-", operator_and_values="-")


def test_field_requires_category():
    with pytest.raises(ValidationError):
        FilterDescriptor(full="a", event_name="a", option_field="fd")


def test_descriptor_is_immutable():
    d = FilterDescriptor(full="execve", event_name="execve")
    with pytest.raises(ValidationError):
        d.event_name = "open"


def test_value_list():
    d = FilterDescriptor(
        full="a.data.p!=/x,/y",
        filter_expression="a.data.p",
        event_name="a",
        option_category="data",
        option_field="p",
        operator="!=",
        values="/x,/y",
        operator_and_values="!=/x,/y",
        residual_filter="data.p!=/x,/y",
    )
    assert d.value_list() == ["/x", "/y"]
    assert d.has_filter is True


def test_value_list_empty():
    assert FilterDescriptor(full="a", event_name="a").value_list() == []


def test_to_dict():
    d = FilterDescriptor(full="-open", event_name="open", operator="-")
    data = d.to_dict()
    assert data["event_name"] == "open"
    assert data["operator"] == "-"
    assert set(data) == {
        "full",
        "filter_expression",
        "event_name",
        "option_category",
        "option_field",
        "operator",
        "values",
        "operator_and_values",
        "residual_filter",
    }


def test_policy_defaults():
    policy = PolicyFilterSet()
    assert policy.policy_id == 0
    assert policy.name == ""
    assert policy.filters == ()


def test_policy_keeps_order():
    names = ["fs", "open", "openat"]
    policy = PolicyFilterSet(
        filters=[FilterDescriptor(full=n, event_name=n) for n in names]
    )
    assert [d.event_name for d in policy.filters] == names
