"""Contract checks for internally synthesized grid actions."""

from __future__ import annotations

from typing import Sequence

from .constants import GRID_COLUMNS, GRID_ROWS


class GridContractError(RuntimeError):
    """Raised when a malformed internal action reaches the grid reducer."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        values: Sequence[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.values = tuple(values) if values is not None else None


def ensure_row_index(row: int) -> int:
    if row < 0 or row >= GRID_ROWS:
        raise GridContractError("Row out of range", index=row)
    return row


def ensure_column_index(column: int) -> int:
    if column < 0 or column >= GRID_COLUMNS:
        raise GridContractError("Column out of range", index=column)
    return column


def ensure_line_values(values: Sequence[str], expected: int, *, index: int) -> tuple[str, ...]:
    if len(values) != expected:
        raise GridContractError(
            f"Expected {expected} values, got {len(values)}",
            index=index,
            values=values,
        )
    return tuple(values)


def ensure_cells_shape(cells: Sequence[Sequence[str]]) -> None:
    if len(cells) != GRID_ROWS:
        raise GridContractError(f"Expected {GRID_ROWS} rows, got {len(cells)}")
    for row, values in enumerate(cells):
        ensure_line_values(values, GRID_COLUMNS, index=row)


__all__ = [
    "GridContractError",
    "ensure_row_index",
    "ensure_column_index",
    "ensure_line_values",
    "ensure_cells_shape",
]
