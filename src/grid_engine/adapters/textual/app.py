"""Executable Textual app hosting the grid engine."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from grid_engine.keymaps import KeyStroke
from grid_engine.runtime import telemetry
from grid_engine.store import GridStore, GridView

from .controller import TextualGridAdapter, TextualUIHooks

_APP_KEYS = {"ctrl+c", "ctrl+q"}


def render_grid(view: GridView, *, blank: str = "·") -> Text:
    """Render cells as text with the cursor cell in reverse video."""

    text = Text()
    for row_index, row in enumerate(view.cells):
        for column_index, value in enumerate(row):
            style = "reverse" if (row_index, column_index) == (
                view.cursor.row,
                view.cursor.column,
            ) else ("bold" if value else "dim")
            text.append(f" {value or blank} ", style=style)
        if row_index < len(view.cells) - 1:
            text.append("\n")
    return text


class GridEditorApp(App[None]):
    """Minimal Textual UI around a ``GridStore``."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #grid-view {
        width: auto;
        height: auto;
        border: round $accent;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, *, store: GridStore | None = None) -> None:
        super().__init__()
        self.store = store or GridStore(name="textual")
        self.adapter: TextualGridAdapter | None = None
        self._grid_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._grid_widget = Static("", id="grid-view")
        self._status_widget = Static("", id="status-line")
        yield self._grid_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_grid=self._update_grid,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualGridAdapter(self.store, hooks)

    def on_unmount(self) -> None:
        if self.adapter:
            self.adapter.close()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in _APP_KEYS:
            return
        stroke = KeyStroke.parse(event.key, text=event.character)
        match = self.adapter.handle_textual_key(
            stroke.key, text=stroke.text, modifiers=stroke.modifiers
        )
        if match is not None:
            event.stop()

    def _update_grid(self, view: GridView) -> None:
        if self._grid_widget:
            self._grid_widget.update(render_grid(view))

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the grid editor Textual demo.")
    parser.add_argument(
        "--preset",
        choices=telemetry.PRESETS,
        default=os.environ.get("GRID_ENGINE_PRESET"),
        help="Telemetry preset (default: configure from GRID_ENGINE_* variables)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum log level when no preset is given (e.g. DEBUG, INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.preset:
        telemetry.configure(preset=args.preset)
    else:
        if args.log_level:
            os.environ["GRID_ENGINE_LOG_LEVEL"] = args.log_level
        # Console output would draw over the Textual screen.
        os.environ.setdefault("GRID_ENGINE_DISABLE_CONSOLE", "1")
        telemetry.configure()
    GridEditorApp().run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
