"""Plain data describing databases, the schemas inside them and their tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Table:
    """A table, optionally belonging to a named schema."""

    name: str
    create_time: datetime | None = None
    update_time: datetime | None = None
    engine: str | None = None
    schema: str | None = None


@dataclass
class Schema:
    """A named schema holding tables."""

    name: str
    tables: list[Table] = field(default_factory=list)


Child = Table | Schema


@dataclass
class Database:
    """A database whose children are tables or schemas."""

    name: str
    children: list[Child] = field(default_factory=list)