import pytest

from sqview.columns import Column
from sqview.insert_row import (
    UNTOUCHED,
    InsertFieldState,
    InsertRowState,
    InsertValueError,
)


def column(name, col_type, not_null=False, default_value=None, is_pk=False):
    return Column(
        cid=0,
        name=name,
        col_type=col_type,
        not_null=not_null,
        default_value=default_value,
        is_pk=is_pk,
    )


def type_text(state, text):
    for ch in text:
        state.insert_char(ch)


def test_build_insert_values_requires_missing_required_fields():
    state = InsertRowState("users", [column("name", "TEXT", True, None)])
    with pytest.raises(InsertValueError, match="name is required"):
        state.build_insert_values()


def test_build_insert_values_omits_untouched_defaults():
    state = InsertRowState(
        "users",
        [column("name", "TEXT", True, None), column("age", "INTEGER", False, "18")],
    )
    state.start_editing()
    type_text(state, "Alice")
    state.stop_editing()

    values = state.build_insert_values()

    assert len(values) == 1
    assert values[0][0] == "name"
    assert values[0][1] == "Alice"


def test_initial_selection_is_first_required_field():
    state = InsertRowState(
        "users",
        [
            column("id", "INTEGER", True, is_pk=True),
            column("note", "TEXT"),
            column("email", "TEXT", True),
        ],
    )
    assert state.selected == 2


def test_initial_selection_defaults_to_zero():
    state = InsertRowState("users", [column("note", "TEXT"), column("x", "TEXT")])
    assert state.selected == 0


def test_integer_field_parses_and_rejects():
    state = InsertRowState("t", [column("age", "INTEGER")])
    type_text(state, "42")
    assert state.build_insert_values() == [("age", 42)]
    state.insert_char("x")
    with pytest.raises(InsertValueError, match="age expects an integer"):
        state.build_insert_values()
    assert state.fields[0].is_input_valid() is False


def test_real_field_parses_and_rejects():
    state = InsertRowState("t", [column("price", "REAL")])
    type_text(state, "2.5")
    assert state.build_insert_values() == [("price", 2.5)]
    state.reset_selected()
    type_text(state, "abc")
    with pytest.raises(InsertValueError, match="price expects a number"):
        state.build_insert_values()


def test_touched_empty_required_field_is_null_and_rejected():
    state = InsertRowState("t", [column("name", "TEXT", True, "x")])
    state.start_editing()
    assert state.fields[0].parsed_value() is None
    with pytest.raises(InsertValueError, match="name is required"):
        state.build_insert_values()


def test_touched_empty_optional_field_is_null():
    state = InsertRowState("t", [column("note", "TEXT")])
    state.start_editing()
    assert state.build_insert_values() == [("note", None)]


def test_untouched_field_reports_untouched():
    field = InsertFieldState.from_column(column("note", "TEXT"))
    assert field.parsed_value() is UNTOUCHED


def test_primary_key_is_never_required():
    state = InsertRowState("t", [column("id", "INTEGER", True, is_pk=True)])
    assert state.build_insert_values() == []


def test_cursor_editing_in_middle():
    state = InsertRowState("t", [column("name", "TEXT")])
    type_text(state, "ac")
    state.move_cursor_left()
    state.insert_char("b")
    field = state.selected_field()
    assert field.input == "abc"
    assert field.cursor_pos == 2
    state.delete_backward()
    assert field.input == "ac"
    assert field.cursor_pos == 1


def test_cursor_bounds():
    state = InsertRowState("t", [column("name", "TEXT")])
    type_text(state, "ab")
    state.move_cursor_right()
    assert state.selected_field().cursor_pos == 2
    state.move_cursor_left()
    state.move_cursor_left()
    state.move_cursor_left()
    assert state.selected_field().cursor_pos == 0
    state.delete_backward()
    assert state.selected_field().input == "ab"


def test_reset_selected_clears_field():
    state = InsertRowState("t", [column("name", "TEXT")])
    state.start_editing()
    type_text(state, "xyz")
    state.reset_selected()
    field = state.selected_field()
    assert (field.input, field.touched, field.cursor_pos, state.editing) == ("", False, 0, False)


def test_move_up_and_down_stay_in_range():
    state = InsertRowState("t", [column("a", "TEXT"), column("b", "TEXT")])
    state.move_up()
    assert state.selected == 0
    state.move_down()
    state.move_down()
    assert state.selected == 1


def test_display_values():
    pk = InsertFieldState.from_column(column("id", "INTEGER", is_pk=True))
    default = InsertFieldState.from_column(column("age", "INTEGER", default_value="18"))
    required = InsertFieldState.from_column(column("name", "TEXT", True))
    optional = InsertFieldState.from_column(column("note", "TEXT"))
    assert pk.display_value() == "<auto>"
    assert default.display_value() == "<default: 18>"
    assert required.display_value() == "<required>"
    assert optional.display_value() == "NULL"


def test_display_editor_value_shows_cursor_while_editing():
    state = InsertRowState("t", [column("name", "TEXT")])
    state.start_editing()
    type_text(state, "ab")
    state.move_cursor_left()
    field = state.selected_field()
    assert field.display_editor_value(True) == "a▌b"
    assert field.display_editor_value(False) == "ab"


def test_start_editing_places_cursor_at_end():
    state = InsertRowState("t", [column("name", "TEXT")])
    type_text(state, "abc")
    state.move_cursor_left()
    state.start_editing()
    assert state.selected_field().cursor_pos == 3


def test_no_fields_is_harmless():
    state = InsertRowState("t", [])
    state.insert_char("a")
    state.delete_backward()
    assert state.selected_field() is None
    assert state.build_insert_values() == []