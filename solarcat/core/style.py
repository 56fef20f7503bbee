"""Style data model shared by the highlighter and the ANSI writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import NamedTuple


class Color(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse a ``rrggbb`` or ``#rrggbb`` string."""
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid hex colour: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class FontStyle(IntFlag):
    BOLD = 1
    UNDERLINE = 2
    ITALIC = 4


PLAIN = FontStyle(0)


@dataclass(frozen=True)
class Style:
    """Foreground colour and font flags for one region of text.

    ``background`` is carried over from the highlighter but is never
    emitted, so output does not fight the terminal's own background.
    """

    foreground: Color
    background: Color | None = None
    font_style: FontStyle = PLAIN

    @property
    def bold(self) -> bool:
        return FontStyle.BOLD in self.font_style

    @property
    def italic(self) -> bool:
        return FontStyle.ITALIC in self.font_style

    @property
    def underline(self) -> bool:
        return FontStyle.UNDERLINE in self.font_style


# A highlighted span: (style, text).
StyledRegion = tuple[Style, str]
