"""Cell editor, row insert, command palette, filter dialog and toast state for a terminal SQLite viewer."""

__version__ = "0.1.4"

__all__ = [
    "columns",
    "command_palette",
    "filter_layout",
    "filter_model",
    "filter_popup",
    "fuzzy",
    "geometry",
    "insert_row",
    "text_editor",
    "toast",
]