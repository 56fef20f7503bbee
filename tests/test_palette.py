"""Tests for the Solarized palette lookup."""

import pytest

from solarcat.core.palette import (
    SOLARIZED_PALETTE,
    AnsiColor,
    UnrecognizedColorError,
    ansi_color,
    ansi_foreground,
)
from solarcat.core.style import Color

BASE_SHADES = [
    "002b36", "073642", "586e75", "657b83",
    "839496", "93a1a1", "eee8d5", "fdf6e3",
]

ACCENTS = {
    "b58900": "\033[33m",
    "cb4b16": "\033[91m",
    "dc322f": "\033[31m",
    "d33682": "\033[35m",
    "6c71c4": "\033[95m",
    "268bd2": "\033[34m",
    "2aa198": "\033[36m",
    "859900": "\033[32m",
}


class TestColor:
    def test_from_hex(self):
        assert Color.from_hex("859900") == Color(0x85, 0x99, 0x00)

    def test_from_hex_with_hash(self):
        assert Color.from_hex("#268BD2") == Color(0x26, 0x8B, 0xD2)

    def test_from_hex_rejects_short(self):
        with pytest.raises(ValueError):
            Color.from_hex("fff")

    def test_str_is_zero_padded(self):
        assert str(Color(1, 2, 3)) == "#010203"


class TestPalette:
    def test_has_sixteen_entries(self):
        assert len(SOLARIZED_PALETTE) == 16

    @pytest.mark.parametrize("hex_value", BASE_SHADES)
    def test_base_shades_reset_foreground(self, hex_value):
        assert ansi_foreground(Color.from_hex(hex_value)) == "\033[39m"

    @pytest.mark.parametrize("hex_value,escape", ACCENTS.items())
    def test_accents_map_to_named_colors(self, hex_value, escape):
        assert ansi_foreground(Color.from_hex(hex_value)) == escape

    def test_accents_are_distinct(self):
        targets = {ansi_color(Color.from_hex(h)) for h in ACCENTS}
        assert len(targets) == 8
        assert AnsiColor.DEFAULT not in targets

    def test_palette_is_read_only(self):
        with pytest.raises(TypeError):
            SOLARIZED_PALETTE[Color(1, 2, 3)] = AnsiColor.RED


class TestUnrecognizedColor:
    def test_raises(self):
        with pytest.raises(UnrecognizedColorError) as exc_info:
            ansi_foreground(Color(1, 2, 3))
        assert exc_info.value.color == Color(1, 2, 3)
        assert "#010203" in str(exc_info.value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            ansi_color(Color(255, 255, 255))
