"""Highlighted source preview widget for the TUI."""

from __future__ import annotations

from typing import Iterable

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from solarcat.core.style import StyledRegion
from solarcat.core.writer import render_ansi

EMPTY_MESSAGE = "No file loaded."


def regions_to_text(regions: Iterable[StyledRegion]) -> Text:
    """Render regions to a Rich Text object.

    Goes through the ANSI writer and Rich's ANSI decoder, so the preview
    shows exactly the escapes that would be printed.
    """
    return Text.from_ansi(render_ansi(regions))


class HighlightPreview(Widget):
    """Scrollable view of a highlighted file."""

    DEFAULT_CSS = """
    HighlightPreview {
        width: 1fr;
        height: 1fr;
        overflow: auto;
        background: $surface;
    }

    HighlightPreview #preview-content {
        width: auto;
        height: auto;
    }
    """

    class Shown(Message):
        """Posted after new content is displayed."""
        def __init__(self, line_count: int) -> None:
            super().__init__()
            self.line_count = line_count

    def compose(self) -> ComposeResult:
        yield Static(EMPTY_MESSAGE, id="preview-content")

    def show(self, regions: Iterable[StyledRegion]) -> None:
        text = regions_to_text(regions)
        self.query_one("#preview-content", Static).update(text)
        self.post_message(self.Shown(len(text.plain.splitlines())))

    def clear(self) -> None:
        self.query_one("#preview-content", Static).update(EMPTY_MESSAGE)
