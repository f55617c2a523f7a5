"""Filter rules for a column and how they are written out in the filter popup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sqview.fuzzy import char_width
from sqview.text_editor import _format_real


class FilterOp(Enum):
    """Comparison a filter rule applies to a column."""

    LT = "<"
    GT = ">"
    EQ = "="
    CONTAINS = "contains"
    REGEX = "regex"

    def label(self) -> str:
        return self.value


_POPUP_LABELS = {
    FilterOp.LT: "<",
    FilterOp.GT: ">",
    FilterOp.EQ: "==",
    FilterOp.CONTAINS: "contains",
    FilterOp.REGEX: "regexp",
}


class ValueKind(Enum):
    """What the operand of a filter rule holds."""

    LITERAL = "literal"
    PATTERN = "pattern"
    REGEX = "regex"
    RANGE = "range"
    LIST = "list"
    FORMULA = "formula"
    N = "n"


@dataclass(frozen=True)
class FilterValue:
    """The operand of a rule.

    ``payload`` is a cell value for literals, text for patterns, regexes and
    formulas, a ``(low, high)`` pair for ranges, a sequence for lists and an
    integer for N.
    """

    kind: ValueKind
    payload: Any = None

    @classmethod
    def literal(cls, value: Any) -> FilterValue:
        return cls(ValueKind.LITERAL, value)

    @classmethod
    def pattern(cls, text: str) -> FilterValue:
        return cls(ValueKind.PATTERN, text)

    @classmethod
    def regex(cls, text: str) -> FilterValue:
        return cls(ValueKind.REGEX, text)


@dataclass
class FilterRule:
    """One rule on a column, which may be switched off without deleting it."""

    op: FilterOp
    value: FilterValue
    enabled: bool = True
    label: str | None = None


@dataclass
class ColumnFilter:
    """The rules on one column; they combine with OR."""

    rules: list[FilterRule] = field(default_factory=list)


def popup_op_label(op: FilterOp) -> str:
    """The operator as shown in the filter popup."""
    return _POPUP_LABELS.get(op, op.label())


def _display_cell(value: Any, quote_text: bool) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, (bytes, bytearray)):
        return f"<blob {len(value)} bytes>"
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return _format_real(value)
    if isinstance(value, int):
        return str(value)
    return f'"{value}"' if quote_text else str(value)


def _debug_cell(value: Any) -> str:
    if value is None:
        return "Null"
    if isinstance(value, (bytes, bytearray)):
        return f"Blob({list(value)})"
    if isinstance(value, float):
        return f"Real({value!r})"
    if isinstance(value, int):
        return f"Integer({int(value)})"
    return f"Text({value!r})"


def draft_value(rule: FilterRule) -> str:
    """The rule's operand as editable text for the value field."""
    kind = rule.value.kind
    if kind is ValueKind.LITERAL:
        return _display_cell(rule.value.payload, quote_text=False)
    if kind in (ValueKind.PATTERN, ValueKind.REGEX):
        return str(rule.value.payload)
    return format_rule(rule)


def format_rule(rule: FilterRule) -> str:
    """The rule as ``<operator> <operand>``."""
    kind = rule.value.kind
    payload = rule.value.payload
    if kind is ValueKind.LITERAL:
        value = _display_cell(payload, quote_text=True)
    elif kind in (ValueKind.PATTERN, ValueKind.REGEX):
        value = f'"{payload}"'
    elif kind is ValueKind.RANGE:
        low, high = payload
        value = f"{_debug_cell(low)}..{_debug_cell(high)}"
    elif kind is ValueKind.LIST:
        value = f"{len(payload)} values"
    else:
        value = str(payload)
    return f"{popup_op_label(rule.op)} {value}"


def format_rule_summary(col_name: str, rule: FilterRule) -> str:
    """The rule prefixed with its column name."""
    return f"{col_name} {format_rule(rule)}"


def truncate(text: str, max_width: int) -> str:
    """Cut ``text`` to ``max_width`` cells, ending in ``…`` when it was cut."""
    if max_width == 0:
        return ""
    out: list[str] = []
    used = 0
    for ch in text:
        width = char_width(ch)
        if used + width > max_width:
            break
        out.append(ch)
        used += width
    if sum(char_width(ch) for ch in text) > max_width and max_width > 1:
        if out:
            out.pop()
        out.append("…")
    return "".join(out)