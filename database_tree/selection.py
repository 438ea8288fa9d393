"""Moving a selection through the visible rows of a tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .item import DatabaseTreeItem
from .tree_items import DatabaseTreeItems


class MoveSelection(Enum):
    """The ways a selection can be moved."""

    UP = auto()
    DOWN = auto()
    MULTIPLE_UP = auto()
    MULTIPLE_DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    END = auto()
    ENTER = auto()


@dataclass(frozen=True)
class VisualSelection:
    """Position of the selection among the visible rows."""

    count: int
    index: int


def _get(items: DatabaseTreeItems, index: int) -> DatabaseTreeItem | None:
    if 0 <= index < len(items):
        return items.tree_items[index]
    return None


def _is_visible(items: DatabaseTreeItems, index: int) -> bool:
    item = _get(items, index)
    return item is not None and item.info.visible


def _changed(new_index: int, current_index: int) -> int | None:
    return None if new_index == current_index else new_index


def visual_index_to_absolute(items: DatabaseTreeItems, visual_index: int) -> int | None:
    """The row index of the ``visual_index``-th visible row, if there is one."""
    for position, (absolute, _) in enumerate(items.iterate(0, len(items))):
        if position == visual_index:
            return absolute
    return None


def calc_visual_selection(
    items: DatabaseTreeItems, selection: int | None
) -> VisualSelection | None:
    """Count the visible rows and find where ``selection`` lies among them."""
    if selection is None:
        return None
    count = 0
    visual_index = 0
    for absolute, _ in items.iterate(0, len(items)):
        if absolute == selection:
            visual_index = count
        count += 1
    return VisualSelection(count=count, index=visual_index)


def selection_start(current_index: int) -> int | None:
    """The first row, or None when already there."""
    return None if current_index == 0 else 0


def selection_end(items: DatabaseTreeItems, current_index: int) -> int | None:
    """The last visible row, or None when already there."""
    new_index = max(len(items) - 1, 0)
    while not _is_visible(items, new_index) and new_index > 0:
        new_index -= 1
    return _changed(new_index, current_index)


def selection_up(items: DatabaseTreeItems, current_index: int, lines: int) -> int | None:
    """Move up by ``lines`` visible rows, stopping at the top."""
    index = current_index
    for _ in range(lines):
        if index == 0:
            break
        while index > 0:
            index -= 1
            if _is_visible(items, index):
                break
        else:
            break
    return _changed(index, current_index)


def selection_down(
    items: DatabaseTreeItems, current_index: int, lines: int
) -> int | None:
    """Move down by ``lines`` visible rows, stopping at the last visible one."""
    last_visible = next(
        (
            index
            for index in range(len(items) - 1, -1, -1)
            if items.tree_items[index].info.visible
        ),
        None,
    )
    if last_visible is None:
        return None
    index = current_index
    for _ in range(lines):
        if index >= last_visible:
            break
        while index < last_visible:
            index += 1
            if _is_visible(items, index):
                break
        else:
            break
    return _changed(index, current_index)


def selection_updown(
    items: DatabaseTreeItems, current_index: int, up: bool
) -> int | None:
    """The next visible row above or below, or None if there is none to move to."""
    index = current_index
    while True:
        new_index = max(index - 1, 0) if up else index + 1
        if new_index == index or new_index >= len(items):
            break
        index = new_index
        if _is_visible(items, index):
            break
    return _changed(index, current_index)


def select_parent(items: DatabaseTreeItems, current_index: int) -> int | None:
    """The nearest visible row above with a smaller indentation."""
    item = _get(items, current_index)
    if item is None:
        return None
    indent = item.info.indent
    index = current_index
    while (above := selection_updown(items, index, True)) is not None:
        index = above
        if items.tree_items[index].info.indent < indent:
            break
    return _changed(index, current_index)


def selection_left(items: DatabaseTreeItems, current_index: int) -> int | None:
    """Collapse an expanded database or schema, otherwise move to the parent."""
    item = _get(items, current_index)
    if item is None:
        return None
    kind = item.kind
    if (kind.is_database() and not kind.is_database_collapsed()) or (
        kind.is_schema() and not kind.is_schema_collapsed()
    ):
        items.collapse(current_index, False)
        return current_index
    return select_parent(items, current_index)


def expand_selection(items: DatabaseTreeItems, current_index: int) -> int | None:
    """Expand a collapsed database or schema; None for anything else."""
    item = _get(items, current_index)
    if item is None:
        return None
    if item.kind.is_database_collapsed() or item.kind.is_schema_collapsed():
        items.expand(current_index, False)
        return current_index
    return None


def selection_right(items: DatabaseTreeItems, current_index: int) -> int | None:
    """Expand a collapsed database or schema, or step into an expanded one."""
    item = _get(items, current_index)
    if item is None:
        return None
    kind = item.kind
    if kind.is_database() or kind.is_schema():
        if kind.is_database_collapsed() or kind.is_schema_collapsed():
            items.expand(current_index, False)
            return current_index
        return selection_updown(items, current_index, False)
    return None