"""The flat list of tree rows with collapsing, expanding and filtering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace
from itertools import islice

from .item import DatabaseTreeItem, DatabaseTreeItemKind
from .models import Database, Schema


def _create_items(
    databases: Iterable[Database], collapsed: set[str]
) -> Iterator[DatabaseTreeItem]:
    seen: set[str] = set()
    for database in databases:
        if database.name not in seen:
            seen.add(database.name)
            yield DatabaseTreeItem.new_database(database, database.name in collapsed)
        for child in database.children:
            if isinstance(child, Schema):
                yield DatabaseTreeItem.new_schema(database, child, True)
                for table in child.tables:
                    yield DatabaseTreeItem.new_table(database, table)
            else:
                yield DatabaseTreeItem.new_table(database, child)


def _is_child_of(parent: DatabaseTreeItemKind, kind: DatabaseTreeItemKind) -> bool:
    """Whether ``kind`` sits directly or indirectly under ``parent``."""
    if parent.is_database():
        return not kind.is_database() and kind.database_name() == parent.name()
    if parent.is_schema():
        schema = kind.schema_name()
        return kind.is_table() and schema is not None and schema == parent.name()
    return False


def _filtered_copy(item: DatabaseTreeItem) -> DatabaseTreeItem:
    copy = DatabaseTreeItem(replace(item.info), item.kind)
    if copy.is_database():
        copy.set_collapsed(False)
    else:
        copy.show()
    return copy


class DatabaseTreeItems:
    """All rows of the tree in display order, visible or not."""

    def __init__(
        self, databases: Iterable[Database] = (), collapsed: Iterable[str] = ()
    ) -> None:
        self.tree_items: list[DatabaseTreeItem] = list(
            _create_items(databases, set(collapsed))
        )

    def filter(self, filter_text: str) -> DatabaseTreeItems:
        """A new list keeping databases, schemas and rows whose name matches."""
        result = DatabaseTreeItems()
        result.tree_items = [
            _filtered_copy(item)
            for item in self.tree_items
            if item.is_database() or item.kind.is_schema() or item.is_match(filter_text)
        ]
        return result

    def __len__(self) -> int:
        return len(self.tree_items)

    def iterate(
        self, start: int, max_amount: int
    ) -> Iterator[tuple[int, DatabaseTreeItem]]:
        """Yield ``(index, item)`` for visible rows from ``start`` on.

        A positive ``max_amount`` lets through one row more than its value;
        zero yields nothing.
        """
        if start < 0:
            raise ValueError("start must not be negative")
        limit = max_amount + 1 if max_amount > 0 else 0
        visible = (
            (index, item)
            for index, item in enumerate(self.tree_items[start:], start)
            if item.info.visible
        )
        return islice(visible, limit)

    def collapse(self, index: int, recursive: bool = False) -> None:
        """Collapse the database or schema at ``index`` and hide its rows."""
        target = self.tree_items[index]

        if target.is_database():
            target.collapse_database()
            name = target.kind.name()
            for item in self.tree_items[index + 1 :]:
                if recursive and item.is_database():
                    item.collapse_database()
                owner = item.kind.database_name()
                if owner is None:
                    return
                if owner == name:
                    item.hide()

        if target.kind.is_schema():
            target.collapse_schema()
            name = target.kind.name()
            for item in self.tree_items[index + 1 :]:
                if recursive and item.kind.is_schema():
                    item.collapse_schema()
                schema = item.kind.schema_name()
                if schema is None:
                    return
                if schema == name:
                    item.hide()

    def expand(self, index: int, recursive: bool = False) -> None:
        """Expand the database or schema at ``index`` and show its rows."""
        target = self.tree_items[index]

        if target.is_database():
            target.expand_database()
            name = target.kind.name()
            if recursive:
                for item in self.tree_items[index + 1 :]:
                    owner = item.kind.database_name()
                    if owner is not None and owner != name:
                        break
                    if item.is_database() and item.kind.is_database_collapsed():
                        item.expand_database()
            self._update_visibility(target.kind, index + 1)

        if target.kind.is_schema():
            target.expand_schema()
            name = target.kind.name()
            if recursive:
                for item in self.tree_items[index + 1 :]:
                    schema = item.kind.schema_name()
                    if schema is not None and schema != name:
                        break
                    if item.kind.is_schema() and item.kind.is_schema_collapsed():
                        item.expand_schema()
            self._update_visibility(target.kind, index + 1)

    def _update_visibility(self, prefix: DatabaseTreeItemKind, start: int) -> None:
        inner_collapsed: DatabaseTreeItemKind | None = None
        for item in self.tree_items[start:]:
            kind = item.kind
            if inner_collapsed is not None:
                if _is_child_of(inner_collapsed, kind):
                    continue
                inner_collapsed = None
            if kind.is_database_collapsed() or kind.is_schema_collapsed():
                inner_collapsed = kind
            if _is_child_of(prefix, kind):
                item.show()