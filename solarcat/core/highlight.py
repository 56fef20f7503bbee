"""Turn source text into styled regions with Pygments' Solarized style."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pygments import lex
from pygments.lexer import Lexer
from pygments.lexers import (
    TextLexer,
    get_lexer_by_name,
    guess_lexer,
    guess_lexer_for_filename,
)
from pygments.styles import get_style_by_name
from pygments.token import Token, _TokenType
from pygments.util import ClassNotFound

from solarcat.core.style import PLAIN, Color, FontStyle, Style, StyledRegion

STYLE_NAME = "solarized-dark"

_SOLARIZED = get_style_by_name(STYLE_NAME)


def lexer_for(
    path: Path | str | None = None,
    code: str = "",
    name: str | None = None,
) -> Lexer:
    """Pick a lexer by explicit name, file name or content.

    Falls back to plain text when nothing matches. Lexers keep leading and
    trailing newlines so output matches the input exactly.
    """
    options = {"stripnl": False, "ensurenl": False}
    if name:
        try:
            return get_lexer_by_name(name, **options)
        except ClassNotFound:
            raise ValueError(f"Unknown lexer: {name}") from None
    if path is not None:
        try:
            return guess_lexer_for_filename(str(path), code, **options)
        except ClassNotFound:
            pass
    if code.strip():
        try:
            return guess_lexer(code, **options)
        except ClassNotFound:
            pass
    return TextLexer(**options)


@lru_cache(maxsize=None)
def style_for_token(token_type: _TokenType) -> Style:
    """Convert the Solarized entry for a token type into a Style."""
    entry = _SOLARIZED.style_for_token(token_type)
    color = entry["color"] or _SOLARIZED.style_for_token(Token)["color"]

    font = PLAIN
    if entry["bold"]:
        font |= FontStyle.BOLD
    if entry["italic"]:
        font |= FontStyle.ITALIC
    if entry["underline"]:
        font |= FontStyle.UNDERLINE

    background = Color.from_hex(entry["bgcolor"]) if entry["bgcolor"] else None
    return Style(Color.from_hex(color), background, font)


def highlight(code: str, lexer: Lexer) -> list[StyledRegion]:
    """Lex code into regions, merging neighbours with the same style."""
    regions: list[StyledRegion] = []
    for token_type, value in lex(code, lexer):
        if not value:
            continue
        style = style_for_token(token_type)
        if regions and regions[-1][0] == style:
            regions[-1] = (style, regions[-1][1] + value)
        else:
            regions.append((style, value))
    return regions
