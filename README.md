# database_tree

A small library that models a tree of databases, their schemas and their
tables. It lets an interface move a selection around that tree. The
selection can go up and down, collapse and expand rows, jump to the top or
the bottom, and the tree can be filtered by name.

## What it does not do

The package draws nothing and connects to no database. You build the
`Database`, `Schema` and `Table` values yourself, for example from a
catalogue query in your own program. The package keeps track of which rows
are visible and which row is selected. Drawing those rows is up to you.

## Installation

```
pip install .
```

## Modules

- `database_tree.models` holds `Database`, `Schema` and `Table`, which are
  plain dataclasses.
- `database_tree.item` holds `DatabaseTreeItem`, one row of the tree. It
  has an `info` (`TreeItemInfo`: `indent`, `visible`) and a `kind`
  (`DatabaseTreeItemKind`).
- `database_tree.tree_items` holds `DatabaseTreeItems`, a flat list of
  every row with `collapse`, `expand`, `filter` and `iterate`.
- `database_tree.selection` holds `MoveSelection`, `VisualSelection` and
  the functions that compute where a move leads.
- `database_tree.tree` holds `DatabaseTree`, which combines the rows with a
  selected index.

## Building a tree

```python
from database_tree.models import Database, Schema, Table
from database_tree.tree import DatabaseTree
from database_tree.selection import MoveSelection

databases = [
    Database("shop", [Table("orders"), Table("customers")]),
    Database("analytics", [Schema("public", [Table("events", schema="public")])]),
]

tree = DatabaseTree(databases, set())
```

Every database row starts out collapsed, and so does every schema row.
This holds whatever is passed as `collapsed`. At first only the database
rows are visible. If any databases are given, the selection starts at row 0.
Otherwise it is `None`.

## Moving the selection

```python
tree.move_selection(MoveSelection.RIGHT)   # expand "shop"
tree.move_selection(MoveSelection.DOWN)    # select "orders"
print(tree.selected_table())               # (Database(name='shop', ...), Table(name='orders', ...))
tree.move_selection(MoveSelection.LEFT)    # back to the parent database
```

`move_selection` returns `True` when the move did something. That is
either a new selection or a row that was expanded or collapsed in place.

The directions are:

- `UP` and `DOWN` move one visible row.
- `MULTIPLE_UP` and `MULTIPLE_DOWN` move ten visible rows.
- `LEFT` collapses an expanded database or schema. On any other row it
  selects the nearest visible row above with a smaller indent.
- `RIGHT` expands a collapsed database or schema. On an expanded one it
  moves to the next visible row.
- `ENTER` expands a collapsed database or schema. On any other row it does
  nothing.
- `TOP` jumps to row 0.
- `END` jumps to the last visible row.

Other operations on the tree:

- `selected_item()` returns the selected row.
- `selected_table()` returns a `(Database, Table)` pair when a table row is
  selected.
- `collapse_recursive()` and `expand_recursive()` act on the selected row
  and the rows beneath it.
- `collapse_but_root()` collapses everything and then re-expands row 0.

## Rendering visible rows

```python
for item, selected in tree.iterate(0, 20):
    marker = ">" if selected else " "
    print(marker, "  " * item.info.indent + item.kind.name())
```

`iterate(start_index_visual, max_amount)` starts at the given position among
the visible rows and yields `(item, selected)` pairs. A positive
`max_amount` lets through at most `max_amount + 1` rows. A `max_amount` of
zero yields nothing.

`tree.visual_selection()` returns a `VisualSelection` with `count`, the
number of visible rows, and `index`, the position of the selection among
them. Use it to scroll.

## Filtering

```python
filtered = tree.filter("ord")
```

This returns a new tree with its selection at row 0. All database and
schema rows are kept. Other rows are kept only if their name contains the
text. In the result:

- database rows are marked expanded;
- every kept non-database row is made visible.

## Running the tests

```
pip install .[test]
pytest
```