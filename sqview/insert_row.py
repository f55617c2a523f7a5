"""State of the popup that stages a new row before it is inserted."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from sqview.columns import ColAffinity, Column, _parse_f64, _parse_i64, affinity

_CURSOR = "▌"


class InsertValueError(ValueError):
    """A staged field is missing or does not fit its column type."""


class Untouched(Enum):
    """Marks a field the user never edited, left to the database default."""

    UNTOUCHED = "untouched"


UNTOUCHED = Untouched.UNTOUCHED

FieldValue = Union[int, float, str, None]


@dataclass
class InsertFieldState:
    """One column of the row being staged, with its typed-in text."""

    name: str
    col_type: str
    not_null: bool = False
    default_value: str | None = None
    is_pk: bool = False
    input: str = ""
    touched: bool = False
    cursor_pos: int = 0

    @classmethod
    def from_column(cls, column: Column) -> InsertFieldState:
        return cls(
            name=column.name,
            col_type=column.col_type,
            not_null=column.not_null,
            default_value=column.default_value,
            is_pk=column.is_pk,
        )

    def parsed_value(self) -> FieldValue | Untouched:
        """The typed value for the column, None for NULL, UNTOUCHED if never edited.

        Raises InsertValueError when the text does not fit the column type.
        """
        if not self.touched:
            return UNTOUCHED
        if not self.input:
            return None
        kind = affinity(self.col_type)
        if kind is ColAffinity.INTEGER:
            number = _parse_i64(self.input)
            if number is None:
                raise InsertValueError(f"{self.name} expects an integer")
            return number
        if kind in (ColAffinity.REAL, ColAffinity.NUMERIC):
            real = _parse_f64(self.input)
            if real is None:
                raise InsertValueError(f"{self.name} expects a number")
            return real
        return self.input

    def is_input_valid(self) -> bool:
        try:
            self.parsed_value()
        except InsertValueError:
            return False
        return True

    def display_value(self) -> str:
        """What the field list shows for this field."""
        if self.touched:
            return self.input or "NULL"
        if self.is_pk:
            return "<auto>"
        if self.default_value is not None:
            return f"<default: {self.default_value}>"
        if self.not_null:
            return "<required>"
        return "NULL"

    def display_editor_value(self, editing: bool) -> str:
        """The editor line: the input with a cursor mark while editing."""
        if not editing:
            return self.display_value()
        pos = self.cursor_pos
        return self.input[:pos] + _CURSOR + self.input[pos:]


class InsertRowState:
    """Fields of a row to insert, the selected field and whether it is being edited."""

    def __init__(self, table: str, columns: list[Column]) -> None:
        self.table = table
        self.fields = [InsertFieldState.from_column(col) for col in columns]
        self.selected = next(
            (
                i
                for i, field in enumerate(self.fields)
                if not field.is_pk and field.not_null and field.default_value is None
            ),
            0,
        )
        self.editing = False

    def move_up(self) -> None:
        self.selected = max(self.selected - 1, 0)

    def move_down(self) -> None:
        if self.selected + 1 < len(self.fields):
            self.selected += 1

    def start_editing(self) -> None:
        self.editing = True
        field = self.selected_field()
        if field is not None:
            field.touched = True
            field.cursor_pos = len(field.input)

    def stop_editing(self) -> None:
        self.editing = False

    def insert_char(self, ch: str) -> None:
        field = self.selected_field()
        if field is None:
            return
        field.touched = True
        pos = field.cursor_pos
        field.input = field.input[:pos] + ch + field.input[pos:]
        field.cursor_pos += 1

    def delete_backward(self) -> None:
        field = self.selected_field()
        if field is None or field.cursor_pos == 0:
            return
        field.touched = True
        pos = field.cursor_pos
        field.input = field.input[: pos - 1] + field.input[pos:]
        field.cursor_pos -= 1

    def move_cursor_left(self) -> None:
        field = self.selected_field()
        if field is not None:
            field.cursor_pos = max(field.cursor_pos - 1, 0)

    def move_cursor_right(self) -> None:
        field = self.selected_field()
        if field is not None and field.cursor_pos < len(field.input):
            field.cursor_pos += 1

    def reset_selected(self) -> None:
        """Forget what was typed into the selected field."""
        self.editing = False
        field = self.selected_field()
        if field is not None:
            field.input = ""
            field.touched = False
            field.cursor_pos = 0

    def build_insert_values(self) -> list[tuple[str, Any]]:
        """Column names and values for the INSERT, leaving untouched fields out.

        Raises InsertValueError for invalid input or a missing required field.
        """
        values: list[tuple[str, Any]] = []
        for field in self.fields:
            value = field.parsed_value()
            required = field.not_null and not field.is_pk
            if value is UNTOUCHED:
                if required and field.default_value is None:
                    raise InsertValueError(f"{field.name} is required")
                continue
            if value is None and required:
                raise InsertValueError(f"{field.name} is required")
            values.append((field.name, value))
        return values

    def selected_field(self) -> InsertFieldState | None:
        if 0 <= self.selected < len(self.fields):
            return self.fields[self.selected]
        return None