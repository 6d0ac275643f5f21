"""UI-agnostic state core for a cursor-addressed character grid editor."""

__all__ = [
    "actions",
    "grid",
    "history",
    "store",
    "keymaps",
    "runtime",
    "adapters",
]

__version__ = "0.1.0"
