"""Inverse-action computation for undoable grid actions.

Undo information is computed from the grid *before* an action runs. Each
user action maps to a group of one or more actions that, replayed in order
against the grid produced by the action, restore the prior grid. More than
one action is needed because

1. actions target the cursor, and cursor moves are not undoable, so every
   group starts by moving the cursor back to where the action happened;
2. inserts and deletes shift a cell, row, or column off the grid, and that
   content has to be written back explicitly.

Restore steps are only emitted when they change something (a blank cell
shifted off the edge needs no restore), which keeps every group minimal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from grid_engine.actions import (
    Action,
    ActionType,
    ClearColumnAt,
    ClearRowAt,
    DeleteCell,
    FillColumnAt,
    FillRowAt,
    InsertCell,
    ShiftDirection,
    create_clear_column_at,
    create_clear_grid,
    create_clear_row_at,
    create_delete_cell,
    create_delete_column,
    create_delete_row,
    create_fill_column_at,
    create_fill_row_at,
    create_insert_cell,
    create_insert_column,
    create_insert_row,
    create_move_cursor_to,
    create_put_value,
    create_set_grid,
)
from grid_engine.grid import BLANK, GRID_COLUMNS, GRID_ROWS, Grid
from grid_engine.grid import cells as ops

UndoActions = Tuple[Action, ...]


@dataclass(frozen=True, slots=True)
class UndoState:
    """Two stacks of action groups.

    Undo never pops ``undo_stack``; every redo entry is matched to the undo
    entry at the same depth from the top.
    """

    undo_stack: Tuple[UndoActions, ...] = ()
    redo_stack: Tuple[UndoActions, ...] = ()


UNDOABLE_TYPES = frozenset(
    {
        ActionType.CLEAR_GRID,
        ActionType.SET_GRID,
        ActionType.PUT_VALUE,
        ActionType.INSERT_CELL,
        ActionType.INSERT_ROW,
        ActionType.INSERT_COLUMN,
        ActionType.DELETE_CELL,
        ActionType.DELETE_ROW,
        ActionType.DELETE_COLUMN,
        ActionType.FILL_ROW_AT,
        ActionType.FILL_COLUMN_AT,
        ActionType.CLEAR_ROW_AT,
        ActionType.CLEAR_COLUMN_AT,
    }
)


def is_undoable_action(action: Action) -> bool:
    return action.type in UNDOABLE_TYPES


def is_cleared(grid: Grid) -> bool:
    """True when the cells equal ``SEED_CELLS``.

    ``ClearGrid`` resets to the seed pattern rather than to blanks, so an
    all-blank grid is not cleared and undoing ``ClearGrid`` must restore it.
    """

    return grid.cells == ops.SEED_CELLS


def _restore_cursor(grid: Grid) -> Action:
    return create_move_cursor_to(grid.cursor.row, grid.cursor.column)


def _undo_clear_grid(grid: Grid, action: Action) -> UndoActions:
    if is_cleared(grid):
        return ()
    return (create_set_grid(grid.cells),)


def _undo_set_grid(grid: Grid, action: Action) -> UndoActions:
    if is_cleared(grid):
        return (create_clear_grid(),)
    return (create_set_grid(grid.cells),)


def _undo_put_value(grid: Grid, action: Action) -> UndoActions:
    row, column = grid.cursor.row, grid.cursor.column
    return (_restore_cursor(grid), create_put_value(grid.cells[row][column]))


def _undo_insert_cell(grid: Grid, action: InsertCell) -> UndoActions:
    row, column = grid.cursor.row, grid.cursor.column
    if action.shift_direction is ShiftDirection.HORIZONTAL:
        end_row, end_column = row, GRID_COLUMNS - 1
    else:
        end_row, end_column = GRID_ROWS - 1, column

    undo: UndoActions = (_restore_cursor(grid), create_delete_cell(action.shift_direction))

    # The far-edge cell is shifted off the grid by the insert.
    discarded = grid.cells[end_row][end_column]
    if discarded == BLANK:
        return undo
    return undo + (
        create_move_cursor_to(end_row, end_column),
        create_put_value(discarded),
        _restore_cursor(grid),
    )


def _undo_insert_row(grid: Grid, action: Action) -> UndoActions:
    last_row = GRID_ROWS - 1
    undo: UndoActions = (_restore_cursor(grid), create_delete_row())
    if ops.row_empty(grid.cells, last_row):
        return undo
    return undo + (create_fill_row_at(last_row, ops.read_row(grid.cells, last_row)),)


def _undo_insert_column(grid: Grid, action: Action) -> UndoActions:
    last_column = GRID_COLUMNS - 1
    undo: UndoActions = (_restore_cursor(grid), create_delete_column())
    if ops.column_empty(grid.cells, last_column):
        return undo
    return undo + (
        create_fill_column_at(last_column, ops.read_column(grid.cells, last_column)),
    )


def _undo_delete_cell(grid: Grid, action: DeleteCell) -> UndoActions:
    row, column = grid.cursor.row, grid.cursor.column
    undo: UndoActions = (_restore_cursor(grid), create_insert_cell(action.shift_direction))

    # Re-inserting restores the shift but leaves a blank where the value was.
    trashed = grid.cells[row][column]
    if trashed == BLANK:
        return undo
    return undo + (create_put_value(trashed),)


def _undo_delete_row(grid: Grid, action: Action) -> UndoActions:
    row = grid.cursor.row
    undo: UndoActions = (_restore_cursor(grid), create_insert_row())
    if ops.row_empty(grid.cells, row):
        return undo
    return undo + (create_fill_row_at(row, ops.read_row(grid.cells, row)),)


def _undo_delete_column(grid: Grid, action: Action) -> UndoActions:
    column = grid.cursor.column
    undo: UndoActions = (_restore_cursor(grid), create_insert_column())
    if ops.column_empty(grid.cells, column):
        return undo
    return undo + (create_fill_column_at(column, ops.read_column(grid.cells, column)),)


def _undo_fill_row_at(grid: Grid, action: FillRowAt) -> UndoActions:
    if ops.row_empty(grid.cells, action.row):
        return (create_clear_row_at(action.row),)
    return (create_fill_row_at(action.row, ops.read_row(grid.cells, action.row)),)


def _undo_fill_column_at(grid: Grid, action: FillColumnAt) -> UndoActions:
    if ops.column_empty(grid.cells, action.column):
        return (create_clear_column_at(action.column),)
    return (
        create_fill_column_at(action.column, ops.read_column(grid.cells, action.column)),
    )


def _undo_clear_row_at(grid: Grid, action: ClearRowAt) -> UndoActions:
    # Clearing a blank row changes nothing.
    if ops.row_empty(grid.cells, action.row):
        return ()
    return (create_fill_row_at(action.row, ops.read_row(grid.cells, action.row)),)


def _undo_clear_column_at(grid: Grid, action: ClearColumnAt) -> UndoActions:
    if ops.column_empty(grid.cells, action.column):
        return ()
    return (
        create_fill_column_at(action.column, ops.read_column(grid.cells, action.column)),
    )


_CALCULATORS: Dict[ActionType, Callable[[Grid, Action], UndoActions]] = {
    ActionType.CLEAR_GRID: _undo_clear_grid,
    ActionType.SET_GRID: _undo_set_grid,
    ActionType.PUT_VALUE: _undo_put_value,
    ActionType.INSERT_CELL: _undo_insert_cell,  # type: ignore[dict-item]
    ActionType.INSERT_ROW: _undo_insert_row,
    ActionType.INSERT_COLUMN: _undo_insert_column,
    ActionType.DELETE_CELL: _undo_delete_cell,  # type: ignore[dict-item]
    ActionType.DELETE_ROW: _undo_delete_row,
    ActionType.DELETE_COLUMN: _undo_delete_column,
    ActionType.FILL_ROW_AT: _undo_fill_row_at,  # type: ignore[dict-item]
    ActionType.FILL_COLUMN_AT: _undo_fill_column_at,  # type: ignore[dict-item]
    ActionType.CLEAR_ROW_AT: _undo_clear_row_at,  # type: ignore[dict-item]
    ActionType.CLEAR_COLUMN_AT: _undo_clear_column_at,  # type: ignore[dict-item]
}


def calculate_undo_actions(grid: Grid, action: Action) -> UndoActions:
    """Return the actions that revert ``action`` when applied after it.

    ``grid`` must be the state *before* ``action`` is applied. Navigation and
    history actions yield an empty group.
    """

    calculator = _CALCULATORS.get(action.type)
    if calculator is None:
        return ()
    return calculator(grid, action)


__all__ = [
    "UndoActions",
    "UndoState",
    "UNDOABLE_TYPES",
    "is_undoable_action",
    "is_cleared",
    "calculate_undo_actions",
]
