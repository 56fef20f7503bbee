"""Write styled regions as 8-colour ANSI text.

Only the basic ANSI colours are emitted, never 24-bit colour: every
terminal theme defines them, light or dark, so highlighting never clashes
with the user's colours. Background colours are ignored for the same reason.
"""

from __future__ import annotations

from typing import BinaryIO, Iterable, Iterator

from solarcat.core.palette import (
    BOLD,
    ITALIC,
    NO_BOLD,
    NO_ITALIC,
    NO_UNDERLINE,
    RESET,
    UNDERLINE,
    ansi_foreground,
)
from solarcat.core.style import Style, StyledRegion


def _font_escapes(style: Style) -> str:
    # Always emit set or unset for each flag; never rely on terminal state.
    return (
        (BOLD if style.bold else NO_BOLD)
        + (ITALIC if style.italic else NO_ITALIC)
        + (UNDERLINE if style.underline else NO_UNDERLINE)
    )


def _ansi_chunks(regions: Iterable[StyledRegion]) -> Iterator[str]:
    """Yield output pieces for each region in order.

    Colours are resolved for every region before the first piece is
    yielded, so an unknown colour produces no output at all.
    """
    resolved = [
        (ansi_foreground(style.foreground), _font_escapes(style), text)
        for style, text in regions
    ]
    for fg, font, text in resolved:
        yield fg
        yield font
        yield text
        yield RESET


def write_as_ansi(
    sink: BinaryIO,
    regions: Iterable[StyledRegion],
    encoding: str = "utf-8",
) -> None:
    """Write regions to a binary sink as ANSI coloured text.

    Each region is written as its foreground colour, explicit bold, italic
    and underline on/off escapes, the text itself and a full reset.

    Args:
        sink: binary writable, e.g. ``sys.stdout.buffer``.
        regions: (style, text) pairs with Solarized foreground colours.
        encoding: encoding for the region text.

    Raises:
        UnrecognizedColorError: a foreground is not a Solarized colour.
            Nothing is written in that case.
        OSError: the sink failed to write; propagated as is.
    """
    for chunk in _ansi_chunks(regions):
        sink.write(chunk.encode(encoding))


def render_ansi(regions: Iterable[StyledRegion]) -> str:
    """Return what :func:`write_as_ansi` would write, as a string."""
    return "".join(_ansi_chunks(regions))


def write_plain(
    sink: BinaryIO,
    regions: Iterable[StyledRegion],
    encoding: str = "utf-8",
) -> None:
    """Write only the text of each region, without escapes."""
    for _style, text in regions:
        sink.write(text.encode(encoding))
