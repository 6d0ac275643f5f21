"""Grid model: cell store, cursor, and their reducers."""

from .cells import SEED_CELLS, cells_from_strings, cells_to_string, make_empty_cells
from .constants import BLANK, GRID_COLUMNS, GRID_ROWS
from .cursor import Cursor, cursor_reducer
from .reducer import INITIAL_GRID, Grid, cells_reducer, grid_reducer
from .validation import GridContractError

__all__ = [
    "BLANK",
    "GRID_ROWS",
    "GRID_COLUMNS",
    "SEED_CELLS",
    "Cursor",
    "Grid",
    "INITIAL_GRID",
    "GridContractError",
    "cells_from_strings",
    "cells_to_string",
    "make_empty_cells",
    "cursor_reducer",
    "cells_reducer",
    "grid_reducer",
]
