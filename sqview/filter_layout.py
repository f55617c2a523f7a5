"""Layout of the filter popup and mapping of mouse clicks onto its parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqview.filter_popup import FilterPopupState
from sqview.fuzzy import char_width
from sqview.geometry import Rect

_DELETE_ACTION = " [x]"


class HitKind(Enum):
    """The part of the filter popup a click landed on."""

    RULE_ROW = "rule_row"
    RULE_TOGGLE = "rule_toggle"
    RULE_DELETE = "rule_delete"
    OPERATOR = "operator"
    OPERATOR_CHEVRON = "operator_chevron"
    VALUE = "value"


@dataclass(frozen=True)
class FilterPopupHit:
    """A click target; ``index`` is the rule row, or the cell offset into the value."""

    kind: HitKind
    index: int | None = None


@dataclass(frozen=True)
class FilterPopupLayout:
    """Screen areas of every part of the filter popup."""

    popup_area: Rect
    rule_list_area: Rect
    rule_rows_area: Rect
    divider_area: Rect
    editor_area: Rect
    operator_box: Rect
    operator_inner: Rect
    value_box: Rect
    value_inner: Rect
    footer_area: Rect


def _split(total: int, constraints: list[tuple[str, int]]) -> list[tuple[int, int]]:
    """Share ``total`` cells among ("min", n) and ("len", n) constraints.

    Minimums are honoured first, then lengths in order; cells left over go to
    the first minimum, or to the last part when there is none.
    Returns (offset, size) pairs.
    """
    sizes = [0] * len(constraints)
    remaining = total
    for i, (kind, amount) in enumerate(constraints):
        if kind == "min":
            sizes[i] = min(amount, remaining)
            remaining -= sizes[i]
    for i, (kind, amount) in enumerate(constraints):
        if kind == "len":
            sizes[i] = min(amount, remaining)
            remaining -= sizes[i]
    if remaining > 0 and constraints:
        grow = next(
            (i for i, (kind, _) in enumerate(constraints) if kind == "min"),
            len(constraints) - 1,
        )
        sizes[grow] += remaining
    out = []
    offset = 0
    for size in sizes:
        out.append((offset, size))
        offset += size
    return out


def _vertical(area: Rect, constraints: list[tuple[str, int]]) -> list[Rect]:
    return [
        Rect(area.x, area.y + offset, area.width, size)
        for offset, size in _split(area.height, constraints)
    ]


def _horizontal(area: Rect, constraints: list[tuple[str, int]]) -> list[Rect]:
    return [
        Rect(area.x + offset, area.y, size, area.height)
        for offset, size in _split(area.width, constraints)
    ]


def popup_layout(area: Rect) -> FilterPopupLayout:
    """Place the popup centred in ``area`` and lay out its parts."""
    popup_w = min(max(min(max(area.width * 3 // 4, 60), area.width) - 25, 40), area.width)
    popup_h = min(max(area.height * 3 // 5 - 6, 12), area.height)
    popup_area = Rect(
        area.x + max(area.width - popup_w, 0) // 2,
        area.y + max(area.height - popup_h, 0) // 2,
        popup_w,
        popup_h,
    )
    body_area, footer_area = _vertical(popup_area.inner(), [("min", 7), ("len", 3)])
    body_width = max(body_area.width - 1, 0)
    editor_width = min(body_width * 38 // 100 + 5, max(body_width - 20, 0))
    rule_list_width = max(body_width - editor_width, 0)
    rule_list_area, divider_area, editor_area = _horizontal(
        body_area, [("len", rule_list_width), ("len", 1), ("len", editor_width)]
    )
    editor_chunks = _vertical(
        editor_area, [("len", 1), ("len", 3), ("len", 3), ("min", 2)]
    )
    return FilterPopupLayout(
        popup_area=popup_area,
        rule_list_area=rule_list_area,
        rule_rows_area=Rect(
            rule_list_area.x,
            rule_list_area.y + 2,
            rule_list_area.width,
            max(rule_list_area.height - 2, 0),
        ),
        divider_area=divider_area,
        editor_area=editor_area,
        operator_box=editor_chunks[1],
        operator_inner=editor_chunks[1].inner(),
        value_box=editor_chunks[2],
        value_inner=editor_chunks[2].inner(),
        footer_area=footer_area,
    )


def hit_test(area: Rect, state: FilterPopupState, x: int, y: int) -> FilterPopupHit | None:
    """The part of the popup under the cell (x, y), or None."""
    layout = popup_layout(area)
    if not layout.popup_area.contains(x, y):
        return None

    rows = layout.rule_rows_area
    rule_count = len(state.col_filter.rules)
    if rows.contains(x, y):
        row_index = y - rows.y
        if row_index > rule_count:
            return None
        if row_index < rule_count:
            if x < rows.x + 3:
                return FilterPopupHit(HitKind.RULE_TOGGLE, row_index)
            actions_width = sum(char_width(ch) for ch in _DELETE_ACTION)
            action_x = rows.x + max(rows.width - actions_width, 0)
            if action_x <= x < action_x + actions_width:
                return FilterPopupHit(HitKind.RULE_DELETE, row_index)
        return FilterPopupHit(HitKind.RULE_ROW, row_index)

    if layout.operator_box.contains(x, y):
        inner = layout.operator_inner
        chevron_x = inner.x + max(inner.width - 1, 0)
        if x == chevron_x:
            return FilterPopupHit(HitKind.OPERATOR_CHEVRON)
        return FilterPopupHit(HitKind.OPERATOR)

    if layout.value_box.contains(x, y):
        return FilterPopupHit(HitKind.VALUE, max(x - layout.value_inner.x, 0))

    return None