"""Pure cell-store transformations.

Cells are a tuple of row tuples. Every function returns a new grid and
reuses untouched rows from its input, so a grid captured in a history
entry is never affected by later edits.
"""

from __future__ import annotations

from typing import Sequence

from grid_engine.actions import Cells

from .constants import BLANK, GRID_COLUMNS, GRID_ROWS
from .cursor import Cursor
from .validation import (
    ensure_cells_shape,
    ensure_column_index,
    ensure_line_values,
    ensure_row_index,
)

BLANK_ROW: tuple[str, ...] = (BLANK,) * GRID_COLUMNS
BLANK_COLUMN: tuple[str, ...] = (BLANK,) * GRID_ROWS

_SEED_PATTERN = (
    "          ",
    "          ",
    "    oo    ",
    "   o  o   ",
    "  oo  oo  ",
    "  O    O  ",
    " OO    OO ",
    " OOO  OOO ",
    "    OO    ",
    "          ",
)


def cells_from_strings(lines: Sequence[str]) -> Cells:
    """Build cells from text rows where a space stands for a blank cell."""

    cells = tuple(
        tuple(BLANK if char == " " else char for char in line) for line in lines
    )
    ensure_cells_shape(cells)
    return cells


def cells_to_string(cells: Cells, *, blank: str = " ") -> str:
    return "\n".join("".join(value or blank for value in row) for row in cells)


def make_empty_cells() -> Cells:
    return (BLANK_ROW,) * GRID_ROWS


SEED_CELLS: Cells = cells_from_strings(_SEED_PATTERN)


def read_row(cells: Cells, row: int) -> tuple[str, ...]:
    return cells[row]


def read_column(cells: Cells, column: int) -> tuple[str, ...]:
    return tuple(row[column] for row in cells)


def row_empty(cells: Cells, row: int) -> bool:
    return all(value == BLANK for value in cells[row])


def column_empty(cells: Cells, column: int) -> bool:
    return all(row[column] == BLANK for row in cells)


def _replace_in_row(row: tuple[str, ...], column: int, value: str) -> tuple[str, ...]:
    return row[:column] + (value,) + row[column + 1 :]


def put_value(cells: Cells, at: Cursor, value: str) -> Cells:
    return (
        cells[: at.row]
        + (_replace_in_row(cells[at.row], at.column, value),)
        + cells[at.row + 1 :]
    )


def insert_cell_shift_right(cells: Cells, at: Cursor) -> Cells:
    row = cells[at.row]
    shifted = row[: at.column] + (BLANK,) + row[at.column : -1]
    return cells[: at.row] + (shifted,) + cells[at.row + 1 :]


def insert_cell_shift_down(cells: Cells, at: Cursor) -> Cells:
    column = read_column(cells, at.column)
    shifted = column[: at.row] + (BLANK,) + column[at.row : -1]
    return fill_column(cells, at.column, shifted)


def delete_cell_shift_left(cells: Cells, at: Cursor) -> Cells:
    row = cells[at.row]
    shifted = row[: at.column] + row[at.column + 1 :] + (BLANK,)
    return cells[: at.row] + (shifted,) + cells[at.row + 1 :]


def delete_cell_shift_up(cells: Cells, at: Cursor) -> Cells:
    column = read_column(cells, at.column)
    shifted = column[: at.row] + column[at.row + 1 :] + (BLANK,)
    return fill_column(cells, at.column, shifted)


def insert_row(cells: Cells, row: int) -> Cells:
    return cells[:row] + (BLANK_ROW,) + cells[row:-1]


def insert_column(cells: Cells, column: int) -> Cells:
    return tuple(values[:column] + (BLANK,) + values[column:-1] for values in cells)


def delete_row(cells: Cells, row: int) -> Cells:
    return cells[:row] + cells[row + 1 :] + (BLANK_ROW,)


def delete_column(cells: Cells, column: int) -> Cells:
    return tuple(values[:column] + values[column + 1 :] + (BLANK,) for values in cells)


def fill_row(cells: Cells, row: int, values: Sequence[str]) -> Cells:
    ensure_row_index(row)
    line = ensure_line_values(values, GRID_COLUMNS, index=row)
    return cells[:row] + (line,) + cells[row + 1 :]


def fill_column(cells: Cells, column: int, values: Sequence[str]) -> Cells:
    ensure_column_index(column)
    line = ensure_line_values(values, GRID_ROWS, index=column)
    return tuple(
        _replace_in_row(row, column, value) for row, value in zip(cells, line)
    )


def clear_row(cells: Cells, row: int) -> Cells:
    return fill_row(cells, row, BLANK_ROW)


def clear_column(cells: Cells, column: int) -> Cells:
    return fill_column(cells, column, BLANK_COLUMN)


__all__ = [
    "BLANK_ROW",
    "BLANK_COLUMN",
    "SEED_CELLS",
    "cells_from_strings",
    "cells_to_string",
    "make_empty_cells",
    "read_row",
    "read_column",
    "row_empty",
    "column_empty",
    "put_value",
    "insert_cell_shift_right",
    "insert_cell_shift_down",
    "delete_cell_shift_left",
    "delete_cell_shift_up",
    "insert_row",
    "insert_column",
    "delete_row",
    "delete_column",
    "fill_row",
    "fill_column",
    "clear_row",
    "clear_column",
]
