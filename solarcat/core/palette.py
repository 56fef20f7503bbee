"""Solarized RGB to 8-colour ANSI mapping.

Solarized maps cleanly onto the basic ANSI colours, so its RGB values can be
mapped back to ANSI colour numbers and rendered with whatever palette the
terminal uses. Accent colours map to their ANSI names. The base shades swap
between the light and dark variants, so all of them map to the terminal's
default foreground to work on both light and dark backgrounds.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from solarcat.core.style import Color

RESET = "\033[0m"

BOLD = "\033[1m"
NO_BOLD = "\033[22m"
ITALIC = "\033[3m"
NO_ITALIC = "\033[23m"
UNDERLINE = "\033[4m"
NO_UNDERLINE = "\033[24m"


class AnsiColor(Enum):
    DEFAULT = 39
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    LIGHT_RED = 91
    LIGHT_MAGENTA = 95

    @property
    def fg(self) -> str:
        """SGR escape selecting this foreground colour."""
        return f"\033[{self.value}m"


SOLARIZED_PALETTE: MappingProxyType[Color, AnsiColor] = MappingProxyType({
    Color(0x00, 0x2B, 0x36): AnsiColor.DEFAULT,  # base03
    Color(0x07, 0x36, 0x42): AnsiColor.DEFAULT,  # base02
    Color(0x58, 0x6E, 0x75): AnsiColor.DEFAULT,  # base01
    Color(0x65, 0x7B, 0x83): AnsiColor.DEFAULT,  # base00
    Color(0x83, 0x94, 0x96): AnsiColor.DEFAULT,  # base0
    Color(0x93, 0xA1, 0xA1): AnsiColor.DEFAULT,  # base1
    Color(0xEE, 0xE8, 0xD5): AnsiColor.DEFAULT,  # base2
    Color(0xFD, 0xF6, 0xE3): AnsiColor.DEFAULT,  # base3
    Color(0xB5, 0x89, 0x00): AnsiColor.YELLOW,
    Color(0xCB, 0x4B, 0x16): AnsiColor.LIGHT_RED,  # orange
    Color(0xDC, 0x32, 0x2F): AnsiColor.RED,
    Color(0xD3, 0x36, 0x82): AnsiColor.MAGENTA,
    Color(0x6C, 0x71, 0xC4): AnsiColor.LIGHT_MAGENTA,  # violet
    Color(0x26, 0x8B, 0xD2): AnsiColor.BLUE,
    Color(0x2A, 0xA1, 0x98): AnsiColor.CYAN,
    Color(0x85, 0x99, 0x00): AnsiColor.GREEN,
})


class UnrecognizedColorError(ValueError):
    """Raised for a foreground colour outside the Solarized palette.

    Usually means the highlighter was given a theme other than Solarized.
    """

    def __init__(self, color: Color) -> None:
        super().__init__(f"Unexpected RGB colour: {color}")
        self.color = color


def ansi_color(color: Color) -> AnsiColor:
    try:
        return SOLARIZED_PALETTE[color]
    except KeyError:
        raise UnrecognizedColorError(color) from None


def ansi_foreground(color: Color) -> str:
    """Return the foreground escape for a Solarized colour."""
    return ansi_color(color).fg
