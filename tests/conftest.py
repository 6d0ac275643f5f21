from __future__ import annotations

from typing import Iterable

import pytest

from grid_engine.actions import Action
from grid_engine.grid import SEED_CELLS, Cursor, cells_from_strings
from grid_engine.history import AppState, app_reducer

# Every cell filled, so every shift discards a non-blank value.
DENSE_CELLS = cells_from_strings(
    [
        "0123456789",
        "abcdefghij",
        "klmnopqrst",
        "uvwxyzABCD",
        "EFGHIJKLMN",
        "OPQRSTUVWX",
        "YZ01234567",
        "89abcdefgh",
        "ijklmnopqr",
        "stuvwxyzAB",
    ]
)


def make_state(
    row: int = 4, column: int = 3, *, cells=SEED_CELLS
) -> AppState:
    return AppState(cursor=Cursor(row, column), cells=cells)


def run_actions(state: AppState, actions: Iterable[Action]) -> AppState:
    for action in actions:
        state = app_reducer(state, action)
    return state


@pytest.fixture
def seed_state() -> AppState:
    return make_state()


@pytest.fixture
def dense_state() -> AppState:
    return make_state(cells=DENSE_CELLS)
