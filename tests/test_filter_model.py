import pytest

from sqview.filter_model import (
    ColumnFilter,
    FilterOp,
    FilterRule,
    FilterValue,
    ValueKind,
    draft_value,
    format_rule,
    format_rule_summary,
    popup_op_label,
    truncate,
)
from sqview.fuzzy import char_width


def test_popup_labels_for_operators():
    assert popup_op_label(FilterOp.LT) == "<"
    assert popup_op_label(FilterOp.GT) == ">"
    assert popup_op_label(FilterOp.EQ) == "=="
    assert popup_op_label(FilterOp.CONTAINS) == "contains"
    assert popup_op_label(FilterOp.REGEX) == "regexp"


def test_pattern_rule_format_and_draft():
    rule = FilterRule(FilterOp.CONTAINS, FilterValue.pattern("gon"))
    assert format_rule(rule) == 'contains "gon"'
    assert draft_value(rule) == "gon"
    assert format_rule_summary("name", rule) == 'name contains "gon"'


def test_integer_literal_format_and_draft():
    rule = FilterRule(FilterOp.GT, FilterValue.literal(42))
    assert draft_value(rule) == "42"
    assert format_rule(rule) == "> 42"


def test_null_and_blob_literals():
    null_rule = FilterRule(FilterOp.EQ, FilterValue.literal(None))
    blob_rule = FilterRule(FilterOp.EQ, FilterValue.literal(b"abc"))
    assert draft_value(null_rule) == "NULL"
    assert draft_value(blob_rule) == "<blob 3 bytes>"


def test_text_literal_is_quoted_only_in_format():
    rule = FilterRule(FilterOp.EQ, FilterValue.literal("Alice"))
    assert draft_value(rule) == "Alice"
    assert format_rule(rule) == '== "Alice"'


def test_list_value_draft_falls_back_to_format():
    rule = FilterRule(FilterOp.EQ, FilterValue(ValueKind.LIST, ["a", "b"]))
    assert draft_value(rule) == format_rule(rule)
    assert format_rule(rule).endswith("2 values")


def test_column_filter_defaults_are_independent():
    first = ColumnFilter()
    second = ColumnFilter()
    first.rules.append(FilterRule(FilterOp.REGEX, FilterValue.regex("^a")))
    assert second.rules == []
    assert first.rules[0].enabled is True
    assert first.rules[0].label is None


def test_truncate_zero_width_is_empty():
    assert truncate("anything", 0) == ""


def test_truncate_keeps_short_text():
    assert truncate("short", 10) == "short"


def test_truncate_marks_cut_text():
    result = truncate("hello world", 5)
    assert result.endswith("…")
    assert "hello world".startswith(result[:-1])


@pytest.mark.parametrize("width", [1, 2, 3, 7, 12])
def test_truncate_fits_width(width):
    result = truncate(" Rules in some_long_column_name ", width)
    assert sum(char_width(ch) for ch in result) <= width
    assert len(result) >= 1