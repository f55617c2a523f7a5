"""State of the popup that edits a single cell as free text."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

from sqview.columns import ColAffinity, _parse_f64, _parse_i64, affinity

_MAX_SCROLL = 0xFFFF
_CURSOR = "▌"


def _format_real(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _reject_constant(name: str) -> Any:
    raise ValueError(f"not valid JSON: {name}")


def _load_json(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _is_json(text: str) -> bool:
    try:
        _load_json(text)
    except ValueError:
        return False
    return True


def _initial_text(original: Any) -> str:
    if original is None or isinstance(original, (bytes, bytearray)):
        return ""
    if isinstance(original, float):
        return _format_real(original)
    return str(original)


def _is_real_type(upper: str) -> bool:
    return "REAL" in upper or "FLOAT" in upper or "DOUBLE" in upper


class TextEditorState:
    """Text being edited for one cell, with a character-indexed cursor."""

    def __init__(
        self,
        table: str,
        rowid: int,
        col_name: str,
        col_type: str,
        original: Any,
        readonly: bool = False,
    ) -> None:
        self.table = table
        self.rowid = rowid
        self.col_name = col_name
        self.col_type = col_type
        self.original = original
        self.readonly = readonly
        self.current = _initial_text(original)
        self.json_mode = False
        if isinstance(original, str):
            try:
                parsed = _load_json(original)
            except ValueError:
                pass
            else:
                self.current = json.dumps(parsed, indent=2, sort_keys=True, ensure_ascii=False)
                self.json_mode = True
        self.is_multiline = self.json_mode or affinity(col_type) is ColAffinity.TEXT
        self.cursor_pos = len(self.current)
        self.scroll_y = 0
        self.valid = True
        self._validate()

    def insert_char(self, ch: str) -> None:
        if self.readonly:
            return
        pos = self.cursor_pos
        self.current = self.current[:pos] + ch + self.current[pos:]
        self.cursor_pos += 1
        self._validate()

    def delete_backward(self) -> None:
        if self.readonly or self.cursor_pos == 0:
            return
        pos = self.cursor_pos
        self.current = self.current[: pos - 1] + self.current[pos:]
        self.cursor_pos -= 1
        self._validate()

    def move_cursor_left(self) -> None:
        self.cursor_pos = max(self.cursor_pos - 1, 0)

    def move_cursor_right(self) -> None:
        if self.cursor_pos < len(self.current):
            self.cursor_pos += 1

    def move_cursor_up(self) -> None:
        line, col = self.cursor_line_col()
        if line > 0:
            self.cursor_pos = self._cursor_from_line_col(line - 1, col)

    def move_cursor_down(self) -> None:
        line, col = self.cursor_line_col()
        if line + 1 < self.line_count():
            self.cursor_pos = self._cursor_from_line_col(line + 1, col)

    def scroll_up(self, lines: int) -> None:
        self.scroll_y = max(self.scroll_y - lines, 0)

    def scroll_down(self, lines: int) -> None:
        max_scroll = max(self.line_count() - 1, 0)
        self.scroll_y = min(self.scroll_y + lines, _MAX_SCROLL, max_scroll)

    def as_sql_value(self) -> int | float | str | None:
        """The edited value converted for the column type; None for NULL."""
        if not self.current:
            return None
        upper = self.col_type.upper()
        if "INT" in upper:
            return _parse_i64(self.current)
        if _is_real_type(upper):
            return _parse_f64(self.current)
        return self.current

    def line_count(self) -> int:
        return max(len(self.current.split("\n")), 1)

    def cursor_line_col(self) -> tuple[int, int]:
        """Zero-based line and column of the cursor."""
        before = self.current[: self.cursor_pos]
        line = before.count("\n")
        col = len(before) - (before.rfind("\n") + 1)
        return line, col

    def effective_scroll_y(self, viewport_lines: int) -> int:
        """The scroll offset that keeps the cursor line inside the viewport."""
        cursor_line = self.cursor_line_col()[0]
        max_scroll = max(self.line_count() - viewport_lines, 0)
        scroll_y = min(self.scroll_y, max_scroll)
        if cursor_line < scroll_y:
            scroll_y = cursor_line
        elif cursor_line >= scroll_y + viewport_lines:
            scroll_y = cursor_line + 1 - viewport_lines
        return scroll_y

    def display_lines(self) -> list[str]:
        """The text with a cursor mark, split into lines; blank lines become a space."""
        pos = self.cursor_pos
        display = self.current[:pos] + _CURSOR + self.current[pos:]
        return [line or " " for line in display.split("\n")]

    def _cursor_from_line_col(self, target_line: int, target_col: int) -> int:
        lines = self.current.split("\n")
        capped = min(target_line, len(lines) - 1)
        pos = sum(len(line) + 1 for line in lines[:capped])
        return pos + min(target_col, len(lines[capped]))

    def _validate(self) -> None:
        upper = self.col_type.upper()
        if "INT" in upper:
            self.valid = not self.current or _parse_i64(self.current) is not None
        elif _is_real_type(upper):
            self.valid = not self.current or _parse_f64(self.current) is not None
        elif self.json_mode:
            self.valid = not self.current.strip() or _is_json(self.current)
        else:
            self.valid = True


def scrollbar_thumb(
    offset: int, total: int, viewport: int, track_height: int
) -> tuple[int, int] | None:
    """Top row and height of the scrollbar thumb, or None when nothing scrolls."""
    if track_height <= 0 or total <= viewport or viewport == 0:
        return None
    thumb_height = min(max(viewport * track_height // total, 1), track_height)
    max_offset = total - viewport
    free = track_height - thumb_height
    thumb_top = min(min(offset, max_offset) * free // max_offset, free)
    return thumb_top, thumb_height