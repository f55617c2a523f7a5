"""State of the popup that edits the filter rules of one column."""

from __future__ import annotations

from enum import Enum

from sqview.columns import _parse_f64, _parse_i64
from sqview.filter_model import (
    ColumnFilter,
    FilterOp,
    FilterRule,
    FilterValue,
    draft_value,
)
from sqview.fuzzy import char_width

_CURSOR = "▌"

POPUP_OPS: tuple[FilterOp, ...] = (
    FilterOp.LT,
    FilterOp.GT,
    FilterOp.EQ,
    FilterOp.CONTAINS,
    FilterOp.REGEX,
)


class FilterRuleError(ValueError):
    """The draft in the editor does not make a valid rule."""


class FilterPopupFocus(Enum):
    """Which part of the filter popup receives keyboard input."""

    RULE_LIST = "rule_list"
    OPERATOR = "operator"
    VALUE = "value"


_NEXT_FOCUS = {
    FilterPopupFocus.RULE_LIST: FilterPopupFocus.OPERATOR,
    FilterPopupFocus.OPERATOR: FilterPopupFocus.VALUE,
    FilterPopupFocus.VALUE: FilterPopupFocus.RULE_LIST,
}
_PREV_FOCUS = {after: before for before, after in _NEXT_FOCUS.items()}


class FilterPopupState:
    """The rules of a column, the selected rule and the draft being edited.

    ``selected_rule`` equal to the number of rules selects the "new rule" row.
    """

    def __init__(
        self, col_name: str, col_type: str, col_filter: ColumnFilter | None = None
    ) -> None:
        self.col_name = col_name
        self.col_type = col_type
        self.col_filter = col_filter if col_filter is not None else ColumnFilter()
        rules = self.col_filter.rules
        self.selected_rule = 0
        self.draft_op: FilterOp = rules[-1].op if rules else FilterOp.CONTAINS
        self.draft_value = ""
        self.draft_cursor_pos = 0
        self.focus = FilterPopupFocus.RULE_LIST if rules else FilterPopupFocus.VALUE
        self._sync_editor_from_selection()

    def next_op(self) -> None:
        idx = POPUP_OPS.index(self.draft_op) if self.draft_op in POPUP_OPS else 0
        self.draft_op = POPUP_OPS[(idx + 1) % len(POPUP_OPS)]

    def prev_op(self) -> None:
        idx = POPUP_OPS.index(self.draft_op) if self.draft_op in POPUP_OPS else 0
        self.draft_op = POPUP_OPS[(idx - 1) % len(POPUP_OPS)]

    def select_prev_rule(self) -> None:
        self.selected_rule = max(self.selected_rule - 1, 0)
        self._sync_editor_from_selection()

    def select_next_rule(self) -> None:
        if self.selected_rule < len(self.col_filter.rules):
            self.selected_rule += 1
        self._sync_editor_from_selection()

    def move_cursor_left(self) -> None:
        self.draft_cursor_pos = max(self.draft_cursor_pos - 1, 0)

    def move_cursor_right(self) -> None:
        if self.draft_cursor_pos < len(self.draft_value):
            self.draft_cursor_pos += 1

    def push_char(self, ch: str) -> None:
        pos = self.draft_cursor_pos
        self.draft_value = self.draft_value[:pos] + ch + self.draft_value[pos:]
        self.draft_cursor_pos += 1

    def pop_char(self) -> None:
        pos = self.draft_cursor_pos
        if pos == 0:
            return
        self.draft_value = self.draft_value[: pos - 1] + self.draft_value[pos:]
        self.draft_cursor_pos -= 1

    def next_focus(self) -> None:
        self.focus = _NEXT_FOCUS[self.focus]

    def prev_focus(self) -> None:
        self.focus = _PREV_FOCUS[self.focus]

    def focus_rule_list(self) -> None:
        self.focus = FilterPopupFocus.RULE_LIST

    def focus_operator(self) -> None:
        self.focus = FilterPopupFocus.OPERATOR

    def focus_value(self) -> None:
        self.focus = FilterPopupFocus.VALUE

    def set_selected_rule(self, selected_rule: int) -> None:
        """Select a rule, or the new-rule row when past the end."""
        self.selected_rule = min(selected_rule, len(self.col_filter.rules))
        self._sync_editor_from_selection()

    def set_cursor_from_display_x(self, display_x: int) -> None:
        """Place the cursor at the character under a click ``display_x`` cells in."""
        width = 0
        cursor = 0
        for ch in self.draft_value:
            ch_width = char_width(ch)
            if width + ch_width > display_x:
                break
            width += ch_width
            cursor += 1
        self.draft_cursor_pos = cursor

    def delete_selected_rule(self) -> bool:
        """Remove the selected rule; False when the new-rule row is selected."""
        rules = self.col_filter.rules
        if self.selected_rule >= len(rules):
            return False
        del rules[self.selected_rule]
        if rules and self.selected_rule == len(rules):
            self.selected_rule = max(self.selected_rule - 1, 0)
        self._clamp_selection()
        self._sync_editor_from_selection()
        return True

    def toggle_selected_rule_enabled(self) -> bool:
        """Switch the selected rule on or off; False when no rule is selected."""
        rules = self.col_filter.rules
        if self.selected_rule >= len(rules):
            return False
        rule = rules[self.selected_rule]
        rule.enabled = not rule.enabled
        return True

    def add_rule(self) -> None:
        """Store the draft as a new rule or over the selected one.

        Raises FilterRuleError when the draft is not a valid rule.
        """
        rule = self._build_rule()
        rules = self.col_filter.rules
        if self.selected_rule < len(rules):
            existing = rules[self.selected_rule]
            rule.enabled = existing.enabled
            rule.label = existing.label
            rules[self.selected_rule] = rule
        else:
            rules.append(rule)
            self.selected_rule = len(rules) - 1
        self._sync_editor_from_selection()

    def display_draft_value(self) -> str:
        """The draft text with a cursor mark."""
        pos = self.draft_cursor_pos
        return self.draft_value[:pos] + _CURSOR + self.draft_value[pos:]

    def is_new_rule_selected(self) -> bool:
        return self.selected_rule >= len(self.col_filter.rules)

    def _build_rule(self) -> FilterRule:
        needle = self.draft_value.strip()
        if not needle:
            raise FilterRuleError("Needle is required")
        op = self.draft_op
        if op is FilterOp.CONTAINS:
            value = FilterValue.pattern(needle)
        elif op is FilterOp.REGEX:
            value = FilterValue.regex(needle)
        elif op in (FilterOp.EQ, FilterOp.LT, FilterOp.GT):
            value = FilterValue.literal(self._parse_literal(needle))
        else:
            raise FilterRuleError("Unsupported filter operator")
        return FilterRule(op=op, value=value, enabled=True, label=None)

    def _parse_literal(self, needle: str) -> int | float | str:
        upper = self.col_type.upper()
        if "INT" in upper:
            number = _parse_i64(needle)
            if number is None:
                raise FilterRuleError("Needle must be a valid integer")
            return number
        if any(marker in upper for marker in ("REAL", "FLOAT", "DOUBLE", "NUM")):
            real = _parse_f64(needle)
            if real is None:
                raise FilterRuleError("Needle must be a valid number")
            return real
        return needle

    def _clamp_selection(self) -> None:
        self.selected_rule = min(self.selected_rule, len(self.col_filter.rules))

    def _sync_editor_from_selection(self) -> None:
        rules = self.col_filter.rules
        if self.selected_rule < len(rules):
            rule = rules[self.selected_rule]
            if rule.op in POPUP_OPS:
                self.draft_op = rule.op
            self.draft_value = draft_value(rule)
            self.draft_cursor_pos = len(self.draft_value)
        else:
            self.draft_value = ""
            self.draft_cursor_pos = 0
            if self.draft_op not in POPUP_OPS:
                self.draft_op = FilterOp.CONTAINS