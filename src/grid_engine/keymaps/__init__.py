"""Declarative key bindings translating host key strokes into grid actions."""

from .models import ActionRef, Binding, KeyStroke
from .registry import (
    TEXT_ACTION_ID,
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)
from .defaults import DEFAULT_ACTIONS, DEFAULT_BINDINGS, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "TEXT_ACTION_ID",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
]
