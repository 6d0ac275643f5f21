"""Closed action vocabulary consumed by the grid reducers."""

from .factories import (
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
    create_move_cursor_by_cell,
    create_move_cursor_to,
    create_move_cursor_to_edge,
    create_put_value,
    create_redo,
    create_set_grid,
    create_undo,
)
from .models import (
    Action,
    ActionType,
    Cells,
    ClearColumnAt,
    ClearGrid,
    ClearRowAt,
    DeleteCell,
    DeleteColumn,
    DeleteRow,
    Direction,
    FillColumnAt,
    FillRowAt,
    InsertCell,
    InsertColumn,
    InsertRow,
    MoveCursorByCell,
    MoveCursorTo,
    MoveCursorToEdge,
    PutValue,
    Redo,
    SetGrid,
    ShiftDirection,
    Undo,
)

__all__ = [
    "Action",
    "ActionType",
    "Cells",
    "Direction",
    "ShiftDirection",
    "ClearGrid",
    "SetGrid",
    "MoveCursorByCell",
    "MoveCursorToEdge",
    "MoveCursorTo",
    "PutValue",
    "InsertCell",
    "InsertRow",
    "InsertColumn",
    "DeleteCell",
    "DeleteRow",
    "DeleteColumn",
    "FillRowAt",
    "FillColumnAt",
    "ClearRowAt",
    "ClearColumnAt",
    "Undo",
    "Redo",
    "create_clear_grid",
    "create_set_grid",
    "create_move_cursor_by_cell",
    "create_move_cursor_to_edge",
    "create_move_cursor_to",
    "create_put_value",
    "create_insert_cell",
    "create_insert_row",
    "create_insert_column",
    "create_delete_cell",
    "create_delete_row",
    "create_delete_column",
    "create_fill_row_at",
    "create_fill_column_at",
    "create_clear_row_at",
    "create_clear_column_at",
    "create_undo",
    "create_redo",
]
