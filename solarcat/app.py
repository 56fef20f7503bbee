"""Textual viewer for solarcat."""

from __future__ import annotations

from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from solarcat.cli import Settings
from solarcat.core.highlight import highlight, lexer_for
from solarcat.tui.preview import HighlightPreview


class SolarcatApp(App):
    """Single-file viewer."""

    TITLE = "solarcat"
    CSS = """
    #status-bar {
        height: 1;
        background: $panel;
        padding: 0 1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("r", "reload", "Reload", priority=True),
    ]

    def __init__(
        self,
        input_path: str,
        settings: Settings | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._input_path = Path(input_path)
        self._settings = settings or Settings()
        self._lexer_name = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield HighlightPreview()
        yield Static("Ready", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self._load_file()

    def _load_file(self) -> None:
        preview = self.query_one(HighlightPreview)
        path = self._input_path
        try:
            code = path.read_bytes().decode("utf-8", errors="replace")
            lexer = lexer_for(path, code, self._settings.lexer)
            preview.show(highlight(code, lexer))
        except (OSError, ValueError) as e:
            preview.clear()
            self._update_status(f"Error: {e}")
            return
        self.title = f"solarcat - {path.name}"
        self._lexer_name = lexer.name

    def on_highlight_preview_shown(self, event: HighlightPreview.Shown) -> None:
        self._update_status(
            f"{self._input_path.name}: {event.line_count} lines ({self._lexer_name})"
        )

    def _update_status(self, message: str) -> None:
        self.query_one("#status-bar", Static).update(Text(message))

    def action_reload(self) -> None:
        self._load_file()


def run_app(input_path: str, settings: Settings | None = None) -> None:
    """Launch the viewer."""
    app = SolarcatApp(input_path=input_path, settings=settings)
    app.run()
