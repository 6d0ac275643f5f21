"""Textual host integration for the grid engine."""

from .controller import TextualGridAdapter, TextualUIHooks

__all__ = ["TextualGridAdapter", "TextualUIHooks"]
