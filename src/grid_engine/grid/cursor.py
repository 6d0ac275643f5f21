"""Cursor position and movement rules."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict

from grid_engine.actions import (
    Action,
    ActionType,
    Direction,
    MoveCursorByCell,
    MoveCursorTo,
    MoveCursorToEdge,
)

from .constants import GRID_COLUMNS, GRID_ROWS


@dataclass(frozen=True, slots=True)
class Cursor:
    row: int = 0
    column: int = 0


def _step(cursor: Cursor, direction: Direction) -> Cursor:
    if direction is Direction.RIGHT:
        return replace(cursor, column=min(cursor.column + 1, GRID_COLUMNS - 1))
    if direction is Direction.DOWN:
        return replace(cursor, row=min(cursor.row + 1, GRID_ROWS - 1))
    if direction is Direction.LEFT:
        return replace(cursor, column=max(cursor.column - 1, 0))
    return replace(cursor, row=max(cursor.row - 1, 0))


def _edge(cursor: Cursor, direction: Direction) -> Cursor:
    if direction is Direction.RIGHT:
        return replace(cursor, column=GRID_COLUMNS - 1)
    if direction is Direction.DOWN:
        return replace(cursor, row=GRID_ROWS - 1)
    if direction is Direction.LEFT:
        return replace(cursor, column=0)
    return replace(cursor, row=0)


def _move_by_cell(cursor: Cursor, action: MoveCursorByCell) -> Cursor:
    return _step(cursor, action.direction)


def _move_to_edge(cursor: Cursor, action: MoveCursorToEdge) -> Cursor:
    return _edge(cursor, action.direction)


def _move_to(cursor: Cursor, action: MoveCursorTo) -> Cursor:
    del cursor
    # Only the undo engine synthesizes this action, always with in-range values.
    return Cursor(row=action.row, column=action.column)


_HANDLERS: Dict[ActionType, Callable[[Cursor, Action], Cursor]] = {
    ActionType.MOVE_CURSOR_BY_CELL: _move_by_cell,  # type: ignore[dict-item]
    ActionType.MOVE_CURSOR_TO_EDGE: _move_to_edge,  # type: ignore[dict-item]
    ActionType.MOVE_CURSOR_TO: _move_to,  # type: ignore[dict-item]
}


def cursor_reducer(cursor: Cursor, action: Action) -> Cursor:
    handler = _HANDLERS.get(action.type)
    if handler is None:
        return cursor
    return handler(cursor, action)


__all__ = ["Cursor", "cursor_reducer"]
