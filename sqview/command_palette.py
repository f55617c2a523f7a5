"""State of the command palette: a fuzzy-filtered list of actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqview.fuzzy import fuzzy_indices


class CommandKind(Enum):
    """The actions the palette offers, valued by their labels."""

    SWITCH_TABLE = "Switch Table"
    EXPORT_CSV = "Export CSV"
    EXPORT_JSON = "Export JSON"
    EXPORT_SQL = "Export SQL"
    COPY_CELL = "Copy cell"
    COPY_ROW_JSON = "Copy row as JSON"
    RELOAD_SCHEMA = "Reload schema"
    TOGGLE_SIDEBAR = "Toggle sidebar"
    TOGGLE_READONLY = "Toggle read-only"
    RESET_COLUMN_WIDTHS = "Reset column widths"
    CLEAR_FILTERS = "Clear filters"
    QUIT = "Quit"


_FIXED_COMMANDS = (
    CommandKind.EXPORT_CSV,
    CommandKind.EXPORT_JSON,
    CommandKind.EXPORT_SQL,
    CommandKind.COPY_CELL,
    CommandKind.COPY_ROW_JSON,
    CommandKind.RELOAD_SCHEMA,
    CommandKind.TOGGLE_SIDEBAR,
    CommandKind.TOGGLE_READONLY,
    CommandKind.RESET_COLUMN_WIDTHS,
    CommandKind.CLEAR_FILTERS,
    CommandKind.QUIT,
)


@dataclass(frozen=True)
class PaletteCommand:
    """One palette entry; ``table`` names the target of a table switch."""

    kind: CommandKind
    table: str | None = None

    def label(self) -> str:
        return self.kind.value

    def search_label(self) -> str:
        """The text shown and matched against the query."""
        if self.kind is CommandKind.SWITCH_TABLE:
            return f"Switch Table: {self.table}"
        return self.label()


class CommandPaletteState:
    """The query typed so far and the selected row among matching commands."""

    def __init__(self, table_names: list[str]) -> None:
        self.query = ""
        self.commands: list[PaletteCommand] = [PaletteCommand(kind) for kind in _FIXED_COMMANDS]
        self.commands.extend(
            PaletteCommand(CommandKind.SWITCH_TABLE, name) for name in table_names
        )
        self.selected = 0

    def filtered(self) -> list[tuple[int, PaletteCommand, list[int]]]:
        """Matching commands, best first, with positions of matched characters."""
        if not self.query:
            return [(i, cmd, []) for i, cmd in enumerate(self.commands)]
        scored = []
        for i, cmd in enumerate(self.commands):
            match = fuzzy_indices(cmd.search_label(), self.query)
            if match is not None:
                score, indices = match
                scored.append((score, i, cmd, indices))
        scored.sort(key=lambda entry: -entry[0])
        return [(i, cmd, indices) for _, i, cmd, indices in scored]

    def move_up(self) -> None:
        self.selected = max(self.selected - 1, 0)

    def move_down(self) -> None:
        if self.selected + 1 < len(self.filtered()):
            self.selected += 1

    def selected_command(self) -> PaletteCommand | None:
        matches = self.filtered()
        if self.selected < len(matches):
            return matches[self.selected][1]
        return None

    def push_char(self, ch: str) -> None:
        self.query += ch
        self.selected = 0

    def pop_char(self) -> None:
        self.query = self.query[:-1]
        self.selected = 0