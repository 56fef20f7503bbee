"""Tests for the TUI preview and viewer app."""

import asyncio

from solarcat.app import SolarcatApp
from solarcat.core.style import Color, FontStyle, Style
from solarcat.tui.preview import regions_to_text

GREEN = Color(0x85, 0x99, 0x00)
BASE0 = Color(0x83, 0x94, 0x96)


class TestRegionsToText:
    def test_plain_text(self):
        text = regions_to_text([
            (Style(GREEN, font_style=FontStyle.BOLD), "green_bold"),
            (Style(BASE0), " rest"),
        ])
        assert text.plain == "green_bold rest"

    def test_styles_survive_decoding(self):
        text = regions_to_text([(Style(GREEN, font_style=FontStyle.BOLD), "x")])
        styles = [span.style for span in text.spans]
        assert any(s.bold and s.color.number == 2 for s in styles)

    def test_multiline(self):
        text = regions_to_text([(Style(BASE0), "a\nb\n")])
        assert text.plain.splitlines() == ["a", "b"]


class TestSolarcatApp:
    def test_loads_file(self, tmp_path):
        path = tmp_path / "example.py"
        path.write_text("print('hi')\n", encoding="utf-8")

        async def run():
            app = SolarcatApp(str(path))
            async with app.run_test() as pilot:
                await pilot.pause()
                return app.title

        assert asyncio.run(run()) == "solarcat - example.py"

    def test_missing_file_keeps_running(self, tmp_path):
        async def run():
            app = SolarcatApp(str(tmp_path / "missing.py"))
            async with app.run_test() as pilot:
                await pilot.pause()
                return app.title

        assert asyncio.run(run()) == "solarcat"
