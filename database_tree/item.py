"""Rows of the database tree: what each row stands for and how it is shown."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering

from .models import Database, Schema, Table


@dataclass
class TreeItemInfo:
    """Display state of a row: its indentation and whether it is shown."""

    indent: int
    visible: bool

    def unindent(self) -> None:
        """Reduce the indentation by one, never below zero."""
        self.indent = max(self.indent - 1, 0)


@dataclass(frozen=True)
class DatabaseTreeItemKind:
    """What a row stands for.

    A row with neither ``table`` nor ``schema`` is the database itself; a row
    with ``table`` is a table of ``database``; a row with ``schema`` is a schema
    of ``database``. ``collapsed`` only has meaning for databases and schemas.
    """

    database: Database
    table: Table | None = None
    schema: Schema | None = None
    collapsed: bool = False

    def __post_init__(self) -> None:
        if self.table is not None and self.schema is not None:
            raise ValueError("a tree row is either a table or a schema, not both")

    def is_database(self) -> bool:
        return self.table is None and self.schema is None

    def is_table(self) -> bool:
        return self.table is not None

    def is_schema(self) -> bool:
        return self.schema is not None

    def is_database_collapsed(self) -> bool:
        return self.is_database() and self.collapsed

    def is_schema_collapsed(self) -> bool:
        return self.is_schema() and self.collapsed

    def name(self) -> str:
        """The name shown for this row."""
        if self.table is not None:
            return self.table.name
        if self.schema is not None:
            return self.schema.name
        return self.database.name

    def database_name(self) -> str | None:
        """The owning database's name, or None for a database row."""
        if self.is_database():
            return None
        return self.database.name

    def schema_name(self) -> str | None:
        """The schema a table row belongs to, or None."""
        if self.table is not None:
            return self.table.schema
        return None


@total_ordering
@dataclass(eq=False)
class DatabaseTreeItem:
    """One row of the tree; rows compare and sort by name."""

    info: TreeItemInfo
    kind: DatabaseTreeItemKind

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def new_table(cls, database: Database, table: Table) -> DatabaseTreeItem:
        indent = 2 if table.schema is not None else 1
        return cls(TreeItemInfo(indent, False), DatabaseTreeItemKind(database, table=table))

    @classmethod
    def new_schema(
        cls, database: Database, schema: Schema, collapsed: bool = True
    ) -> DatabaseTreeItem:
        """A hidden schema row; schemas always start collapsed."""
        return cls(
            TreeItemInfo(1, False),
            DatabaseTreeItemKind(database, schema=schema, collapsed=True),
        )

    @classmethod
    def new_database(cls, database: Database, collapsed: bool = True) -> DatabaseTreeItem:
        """A visible database row; databases always start collapsed."""
        return cls(TreeItemInfo(0, True), DatabaseTreeItemKind(database, collapsed=True))

    def set_collapsed(self, collapsed: bool) -> None:
        """Set the collapsed state of a database row; other rows are untouched."""
        if self.kind.is_database():
            self.kind = replace(self.kind, collapsed=collapsed)

    def collapse_database(self) -> None:
        if self.kind.is_database():
            self.kind = replace(self.kind, collapsed=True)

    def expand_database(self) -> None:
        if self.kind.is_database():
            self.kind = replace(self.kind, collapsed=False)

    def collapse_schema(self) -> None:
        if self.kind.is_schema():
            self.kind = replace(self.kind, collapsed=True)

    def expand_schema(self) -> None:
        if self.kind.is_schema():
            self.kind = replace(self.kind, collapsed=False)

    def show(self) -> None:
        self.info.visible = True

    def hide(self) -> None:
        self.info.visible = False

    def is_match(self, filter_text: str) -> bool:
        """Whether the row's name contains ``filter_text``."""
        return filter_text in self.kind.name()

    def is_database(self) -> bool:
        return self.kind.is_database()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatabaseTreeItem):
            return NotImplemented
        if self.is_database() != other.is_database():
            return False
        return self.kind.name() == other.kind.name()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DatabaseTreeItem):
            return NotImplemented
        return self.kind.name() < other.kind.name()