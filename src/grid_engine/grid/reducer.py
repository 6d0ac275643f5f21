"""Grid reducer combining the cell store with the cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict

from grid_engine.actions import (
    Action,
    ActionType,
    Cells,
    ClearColumnAt,
    ClearRowAt,
    DeleteCell,
    FillColumnAt,
    FillRowAt,
    InsertCell,
    PutValue,
    SetGrid,
    ShiftDirection,
)

from . import cells as ops
from .cursor import Cursor, cursor_reducer
from .validation import ensure_cells_shape


@dataclass(frozen=True, slots=True)
class Grid:
    """Externally visible editable state."""

    cursor: Cursor = field(default_factory=Cursor)
    cells: Cells = ops.SEED_CELLS


INITIAL_GRID = Grid()

CellsHandler = Callable[[Cells, Cursor, Action], Cells]


def _clear_grid(cells: Cells, cursor: Cursor, action: Action) -> Cells:
    return ops.SEED_CELLS


def _set_grid(cells: Cells, cursor: Cursor, action: SetGrid) -> Cells:
    ensure_cells_shape(action.cells)
    return action.cells


def _put_value(cells: Cells, cursor: Cursor, action: PutValue) -> Cells:
    return ops.put_value(cells, cursor, action.value)


def _insert_cell(cells: Cells, cursor: Cursor, action: InsertCell) -> Cells:
    if action.shift_direction is ShiftDirection.HORIZONTAL:
        return ops.insert_cell_shift_right(cells, cursor)
    return ops.insert_cell_shift_down(cells, cursor)


def _delete_cell(cells: Cells, cursor: Cursor, action: DeleteCell) -> Cells:
    if action.shift_direction is ShiftDirection.HORIZONTAL:
        return ops.delete_cell_shift_left(cells, cursor)
    return ops.delete_cell_shift_up(cells, cursor)


def _insert_row(cells: Cells, cursor: Cursor, action: Action) -> Cells:
    return ops.insert_row(cells, cursor.row)


def _insert_column(cells: Cells, cursor: Cursor, action: Action) -> Cells:
    return ops.insert_column(cells, cursor.column)


def _delete_row(cells: Cells, cursor: Cursor, action: Action) -> Cells:
    return ops.delete_row(cells, cursor.row)


def _delete_column(cells: Cells, cursor: Cursor, action: Action) -> Cells:
    return ops.delete_column(cells, cursor.column)


def _fill_row_at(cells: Cells, cursor: Cursor, action: FillRowAt) -> Cells:
    return ops.fill_row(cells, action.row, action.values)


def _fill_column_at(cells: Cells, cursor: Cursor, action: FillColumnAt) -> Cells:
    return ops.fill_column(cells, action.column, action.values)


def _clear_row_at(cells: Cells, cursor: Cursor, action: ClearRowAt) -> Cells:
    return ops.clear_row(cells, action.row)


def _clear_column_at(cells: Cells, cursor: Cursor, action: ClearColumnAt) -> Cells:
    return ops.clear_column(cells, action.column)


_HANDLERS: Dict[ActionType, CellsHandler] = {
    ActionType.CLEAR_GRID: _clear_grid,
    ActionType.SET_GRID: _set_grid,  # type: ignore[dict-item]
    ActionType.PUT_VALUE: _put_value,  # type: ignore[dict-item]
    ActionType.INSERT_CELL: _insert_cell,  # type: ignore[dict-item]
    ActionType.INSERT_ROW: _insert_row,
    ActionType.INSERT_COLUMN: _insert_column,
    ActionType.DELETE_CELL: _delete_cell,  # type: ignore[dict-item]
    ActionType.DELETE_ROW: _delete_row,
    ActionType.DELETE_COLUMN: _delete_column,
    ActionType.FILL_ROW_AT: _fill_row_at,  # type: ignore[dict-item]
    ActionType.FILL_COLUMN_AT: _fill_column_at,  # type: ignore[dict-item]
    ActionType.CLEAR_ROW_AT: _clear_row_at,  # type: ignore[dict-item]
    ActionType.CLEAR_COLUMN_AT: _clear_column_at,  # type: ignore[dict-item]
}


def cells_reducer(cells: Cells, cursor: Cursor, action: Action) -> Cells:
    handler = _HANDLERS.get(action.type)
    if handler is None:
        return cells
    return handler(cells, cursor, action)


def grid_reducer(grid: Grid, action: Action) -> Grid:
    return Grid(
        cursor=cursor_reducer(grid.cursor, action),
        cells=cells_reducer(grid.cells, grid.cursor, action),
    )


__all__ = ["Grid", "INITIAL_GRID", "cells_reducer", "grid_reducer"]
