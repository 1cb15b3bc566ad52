"""Tests for operator and value extraction."""

import pytest

from evtflags.core.errors import InvalidFilterFlagFormatError
from evtflags.core.operators import extract_operator_and_values, find_operator


class TestFindOperator:
    """Tests for find_operator."""

    def test_no_operator(self):
        assert find_operator("execve,open") == -1

    def test_first_operator_character_wins(self):
        assert find_operator("open.retval>=0") == 11
        assert find_operator("a.b.c!=x=y") == 5

    def test_operator_at_start(self):
        assert find_operator("=x") == 0


class TestExtractOperatorAndValues:
    """Tests for extract_operator_and_values."""

    @pytest.mark.parametrize(
        "flag,operator,values",
        [
            ("close.data.fd=5", "=", "5"),
            ("openat.data.pathname!=/tmp/1,/bin/ls", "!=", "/tmp/1,/bin/ls"),
            ("open.retval<0", "<", "0"),
            ("open.retval>0", ">", "0"),
            ("open.retval<=0", "<=", "0"),
            ("open.retval>=-1", ">=", "-1"),
        ],
    )
    def test_operators(self, flag, operator, values):
        parts = extract_operator_and_values(flag, find_operator(flag))
        assert parts.operator == operator
        assert parts.values == values

    def test_operator_and_values_is_verbatim_suffix(self):
        flag = "openat.data.pathname!=/tmp/1,/bin/ls"
        idx = find_operator(flag)
        parts = extract_operator_and_values(flag, idx)
        assert parts.operator_and_values == "!=/tmp/1,/bin/ls"
        assert flag[:idx] + parts.operator_and_values == flag

    def test_empty_values_allowed(self):
        """A flag ending at the operator is syntactically legal."""
        parts = extract_operator_and_values("open.retval=", 11)
        assert parts.operator == "="
        assert parts.values == ""
        assert parts.operator_and_values == "="

    def test_trailing_less_than(self):
        parts = extract_operator_and_values("open.retval<", 11)
        assert parts.operator == "<"
        assert parts.values == ""

    def test_double_equals_is_single_operator(self):
        """Only '!', '<' and '>' combine with a following '='."""
        parts = extract_operator_and_values("close.data.fd==5", 13)
        assert parts.operator == "="
        assert parts.values == "=5"

    def test_less_than_followed_by_greater_than(self):
        parts = extract_operator_and_values("open.retval<>0", 11)
        assert parts.operator == "<"
        assert parts.values == ">0"

    @pytest.mark.parametrize("flag", ["open.data.x!5", "open.data.x!", "open.data.x!<5"])
    def test_bare_bang_rejected(self, flag):
        with pytest.raises(InvalidFilterFlagFormatError) as exc_info:
            extract_operator_and_values(flag, find_operator(flag))
        assert exc_info.value.flag == flag

    @pytest.mark.parametrize("idx", [-1, 15, 100])
    def test_index_out_of_range(self, idx):
        with pytest.raises(InvalidFilterFlagFormatError):
            extract_operator_and_values("close.data.fd=5", idx)

    def test_index_not_on_operator(self):
        with pytest.raises(InvalidFilterFlagFormatError):
            extract_operator_and_values("close.data.fd=5", 0)
