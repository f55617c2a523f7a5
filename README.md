# sqview

This package holds the state behind the popups of a keyboard-first terminal SQLite
viewer. It covers the cell text editor, the staged row insert, the command palette,
the per-column filter dialog with its layout and mouse hit-testing, and corner
notifications. Each piece is a plain Python object. It takes key-level actions such as
moving, typing and toggling, and it yields SQLite values in their Python forms: `None`,
`int`, `float`, `str` and `bytes`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `sqview.geometry` | `Rect` with `inner()`, `shadow()`, `contains(x, y)`, `right()`, `bottom()` |
| `sqview.columns` | `Column`, `ColAffinity` and `affinity(col_type)` following SQLite's affinity rules |
| `sqview.text_editor` | `TextEditorState`, a cursor-based editor that pretty-prints and validates JSON text; `scrollbar_thumb` |
| `sqview.fuzzy` | `fuzzy_indices(choice, pattern)`, a scored subsequence matcher; `char_width(ch)` |
| `sqview.command_palette` | `CommandKind`, `PaletteCommand`, `CommandPaletteState` |
| `sqview.insert_row` | `InsertFieldState` and `InsertRowState`; raises `InsertValueError` |
| `sqview.filter_model` | `FilterOp`, `ValueKind`, `FilterValue`, `FilterRule`, `ColumnFilter`, rule formatting and `truncate` |
| `sqview.filter_popup` | `FilterPopupState` for editing one column's rules; raises `FilterRuleError` |
| `sqview.filter_layout` | `popup_layout(area)` and `hit_test(area, state, x, y)` for the filter dialog |
| `sqview.toast` | `ToastKind`, `Toast`, `ToastState` (at most five, expiring after 3 s or 5 s for errors), `toast_width` |

## Examples

Editing a JSON cell:

```python
from sqview.text_editor import TextEditorState

editor = TextEditorState("users", 1, "meta", "TEXT", '{"b": 1, "a": 2}')
editor.json_mode        # True
editor.current          # '{\n  "a": 2,\n  "b": 1\n}'
editor.valid            # True
```

Adding a filter rule:

```python
from sqview.filter_model import FilterOp, format_rule_summary
from sqview.filter_popup import FilterPopupState

popup = FilterPopupState("amount", "INTEGER")
popup.draft_op = FilterOp.GT
for ch in "42":
    popup.push_char(ch)
popup.add_rule()
rule = popup.col_filter.rules[0]
format_rule_summary("amount", rule)   # 'amount > 42'
```

Staging a row:

```python
from sqview.columns import Column
from sqview.insert_row import InsertRowState, InsertValueError

state = InsertRowState("users", [Column(0, "name", "TEXT", not_null=True)])
try:
    state.build_insert_values()
except InsertValueError as err:
    print(err)                        # name is required
```

Fuzzy matching:

```python
from sqview.fuzzy import fuzzy_indices

score, indices = fuzzy_indices("Export CSV", "ecsv")
indices                               # [0, 7, 8, 9]
```

## What this package does not do

- It draws nothing. No terminal rendering is included; a toolkit of your choice paints
  the state these objects hold.
- It opens no database and runs no SQL. Values come out ready to be written, but the
  writing is left to the caller.
- It has no command to run and no event loop.
- It has no date or date-time picker, no value picker for enumerated column values, no
  relative-date formatting of search results and no help screen.