"""Tests for the column sanitization helpers of features/field_groups/models.py."""

import pytest

from userfields.features.field_groups.models import (
    FieldGroup,
    absint,
    intval,
    is_empty,
    is_numeric,
    sanitize_text_field,
)


class TestSanitizeTextField:
    def test_strips_tags(self):
        assert sanitize_text_field("<b>Main</b> fields") == "Main fields"

    def test_drops_script_content(self):
        assert sanitize_text_field("Hi<script>alert(1)</script>") == "Hi"

    def test_collapses_whitespace(self):
        assert sanitize_text_field("  a \n\t b  ") == "a b"

    def test_removes_encoded_octets(self):
        assert sanitize_text_field("a%20b%2Fc") == "abc"

    def test_none_and_numbers(self):
        assert sanitize_text_field(None) == ""
        assert sanitize_text_field(12) == "12"


class TestNumeric:
    @pytest.mark.parametrize("value", [0, 3, "12", " 4", "1.5", "-2", "1e3", 2.0])
    def test_numeric(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", ["abc", "", "12abc", None, True, [], float("nan"), float("inf"), "1e400", "-1e400"])
    def test_not_numeric(self, value):
        assert not is_numeric(value)

    def test_intval(self):
        assert intval("12abc") == 12
        assert intval("abc") == 0
        assert intval("7.9") == 7
        assert intval("1e3") == 1000
        assert intval(-4.2) == -4

    def test_absint(self):
        assert absint("-5") == 5
        assert absint(None) == 0


class TestSanitizeColumns:
    @pytest.fixture
    def group(self, repo, hook_registry):
        return FieldGroup(repo=repo, hooks=hook_registry)

    @pytest.mark.parametrize("value", ["abc", -3, "-1", True, None, [1]])
    def test_invalid_integer_falls_back_to_default(self, group, value):
        assert group.sanitize_columns({"group_order": value}) == {"group_order": 0}

    @pytest.mark.parametrize("value,expected", [("2", 2), (4.0, 4), ("7.9", 7), (0, 0)])
    def test_valid_integer_is_coerced(self, group, value, expected):
        assert group.sanitize_columns({"group_order": value}) == {"group_order": expected}

    def test_string_column_json_encodes_arrays(self, group):
        data = group.sanitize_columns({"description": ["a", "b"], "name": {"k": 1}})
        assert data == {"description": '["a", "b"]', "name": '{"k": 1}'}

    def test_only_provided_keys_are_touched(self, group):
        assert group.sanitize_columns({}) == {}

    def test_unknown_keys_are_left_alone(self, group):
        data = group.sanitize_columns({"color": "<i>red</i>", "name": "<i>A</i>"})
        assert data == {"color": "<i>red</i>", "name": "A"}

    def test_input_is_not_mutated(self, group):
        source = {"name": " A "}
        group.sanitize_columns(source)
        assert source == {"name": " A "}


class TestIntegerBounds:
    @pytest.fixture
    def group(self, repo, hook_registry):
        return FieldGroup(repo=repo, hooks=hook_registry)

    def test_infinite_string_falls_back_to_default(self, group):
        assert group.sanitize_columns({"group_order": "1e400"}) == {"group_order": 0}

    @pytest.mark.parametrize("value", [10**20, str(10**20), 2**63])
    def test_out_of_range_falls_back_to_default(self, group, value):
        assert group.sanitize_columns({"group_order": value}) == {"group_order": 0}

    def test_largest_column_value_is_kept(self, group):
        assert group.sanitize_columns({"group_order": 2**63 - 1}) == {"group_order": 2**63 - 1}

    def test_intval_never_raises_on_infinite_input(self):
        assert intval("1e400") == 1
        assert intval(float("inf")) == 0


class TestIsEmpty:
    @pytest.mark.parametrize("value", [None, "", "0", 0, False, [], {}])
    def test_empty(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", ["a", " ", "00", 1, ["x"]])
    def test_not_empty(self, value):
        assert not is_empty(value)
