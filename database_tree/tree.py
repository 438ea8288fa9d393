"""A database tree with a selection that moves through its visible rows."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .item import DatabaseTreeItem
from .models import Database, Table
from .selection import (
    MoveSelection,
    VisualSelection,
    calc_visual_selection,
    expand_selection,
    selection_down,
    selection_end,
    selection_left,
    selection_right,
    selection_start,
    selection_up,
    visual_index_to_absolute,
)
from .tree_items import DatabaseTreeItems

_PAGE = 10


class DatabaseTree:
    """The rows of a set of databases together with the selected row."""

    def __init__(
        self, databases: Iterable[Database] = (), collapsed: Iterable[str] = ()
    ) -> None:
        databases = list(databases)
        self.items = DatabaseTreeItems(databases, collapsed)
        self.selection: int | None = 0 if databases else None
        self._visual_selection = calc_visual_selection(self.items, self.selection)

    @classmethod
    def _from_items(cls, items: DatabaseTreeItems, selection: int | None) -> DatabaseTree:
        tree = cls()
        tree.items = items
        tree.selection = selection
        tree._visual_selection = calc_visual_selection(items, selection)
        return tree

    def filter(self, filter_text: str) -> DatabaseTree:
        """A new tree holding only the rows that match ``filter_text``."""
        return self._from_items(self.items.filter(filter_text), 0)

    def collapse_but_root(self) -> None:
        """Collapse everything below the first row, leaving that row expanded."""
        self.items.collapse(0, True)
        self.items.expand(0, False)

    def iterate(
        self, start_index_visual: int, max_amount: int
    ) -> Iterator[tuple[DatabaseTreeItem, bool]]:
        """Yield visible rows from a visual position, each with its selected flag."""
        start = visual_index_to_absolute(self.items, start_index_visual) or 0
        for index, item in self.items.iterate(start, max_amount):
            yield item, self.selection == index

    def visual_selection(self) -> VisualSelection | None:
        """Where the selection lies among the visible rows."""
        return self._visual_selection

    def selected_item(self) -> DatabaseTreeItem | None:
        if self.selection is None or not 0 <= self.selection < len(self.items):
            return None
        return self.items.tree_items[self.selection]

    def selected_table(self) -> tuple[Database, Table] | None:
        """The database and table of the selected row, if it is a table."""
        item = self.selected_item()
        if item is None or item.kind.table is None:
            return None
        return item.kind.database, item.kind.table

    def collapse_recursive(self) -> None:
        if self.selection is not None:
            self.items.collapse(self.selection, True)

    def expand_recursive(self) -> None:
        if self.selection is not None:
            self.items.expand(self.selection, True)

    def move_selection(self, direction: MoveSelection) -> bool:
        """Apply a move; True when the selection moved or the tree changed."""
        selection = self.selection
        if selection is None:
            return False

        moves = {
            MoveSelection.UP: lambda: selection_up(self.items, selection, 1),
            MoveSelection.DOWN: lambda: selection_down(self.items, selection, 1),
            MoveSelection.MULTIPLE_UP: lambda: selection_up(self.items, selection, _PAGE),
            MoveSelection.MULTIPLE_DOWN: lambda: selection_down(
                self.items, selection, _PAGE
            ),
            MoveSelection.LEFT: lambda: selection_left(self.items, selection),
            MoveSelection.RIGHT: lambda: selection_right(self.items, selection),
            MoveSelection.TOP: lambda: selection_start(selection),
            MoveSelection.END: lambda: selection_end(self.items, selection),
            MoveSelection.ENTER: lambda: expand_selection(self.items, selection),
        }
        new_index = moves[direction]()

        changed = new_index is not None and new_index != selection
        if changed:
            self.selection = new_index
            self._visual_selection = calc_visual_selection(self.items, new_index)

        return changed or new_index is not None