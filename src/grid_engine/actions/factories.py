"""Factory helpers; the only sanctioned way to build actions."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import (
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


def create_clear_grid() -> ClearGrid:
    return ClearGrid()


def create_set_grid(cells: Cells | Sequence[Sequence[str]]) -> SetGrid:
    return SetGrid(cells=cells)  # type: ignore[arg-type]


def create_move_cursor_by_cell(direction: Direction) -> MoveCursorByCell:
    return MoveCursorByCell(direction=direction)


def create_move_cursor_to_edge(direction: Direction) -> MoveCursorToEdge:
    return MoveCursorToEdge(direction=direction)


def create_move_cursor_to(row: int, column: int) -> MoveCursorTo:
    return MoveCursorTo(row=row, column=column)


def create_put_value(value: str) -> PutValue:
    return PutValue(value=value)


def create_insert_cell(shift_direction: ShiftDirection) -> InsertCell:
    return InsertCell(shift_direction=shift_direction)


def create_insert_row() -> InsertRow:
    return InsertRow()


def create_insert_column() -> InsertColumn:
    return InsertColumn()


def create_delete_cell(shift_direction: ShiftDirection) -> DeleteCell:
    return DeleteCell(shift_direction=shift_direction)


def create_delete_row() -> DeleteRow:
    return DeleteRow()


def create_delete_column() -> DeleteColumn:
    return DeleteColumn()


def create_fill_row_at(row: int, values: Iterable[str]) -> FillRowAt:
    return FillRowAt(row=row, values=tuple(values))


def create_fill_column_at(column: int, values: Iterable[str]) -> FillColumnAt:
    return FillColumnAt(column=column, values=tuple(values))


def create_clear_row_at(row: int) -> ClearRowAt:
    return ClearRowAt(row=row)


def create_clear_column_at(column: int) -> ClearColumnAt:
    return ClearColumnAt(column=column)


def create_undo() -> Undo:
    return Undo()


def create_redo() -> Redo:
    return Redo()


__all__ = [
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
