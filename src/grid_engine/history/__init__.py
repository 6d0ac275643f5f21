"""Undo/redo engine and the top-level application reducer."""

from .app import AppState, app_reducer, initial_state, perform_undo_actions, squash_redo_stack
from .undo import (
    UndoActions,
    UndoState,
    calculate_undo_actions,
    is_cleared,
    is_undoable_action,
)

__all__ = [
    "AppState",
    "UndoActions",
    "UndoState",
    "app_reducer",
    "initial_state",
    "perform_undo_actions",
    "squash_redo_stack",
    "calculate_undo_actions",
    "is_cleared",
    "is_undoable_action",
]
