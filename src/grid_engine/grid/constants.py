"""Fixed grid dimensions shared by every reducer."""

from __future__ import annotations

GRID_ROWS = 10
GRID_COLUMNS = 10

BLANK = ""

__all__ = ["GRID_ROWS", "GRID_COLUMNS", "BLANK"]
