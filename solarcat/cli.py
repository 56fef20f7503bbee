"""Command-line interface for solarcat.

Prints files with Solarized syntax highlighting mapped to the basic ANSI
colours, or opens them in the interactive viewer.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from solarcat.utils.terminal import ColorMode, should_colorize


@dataclass(frozen=True)
class Settings:
    lexer: str | None = None
    color_mode: ColorMode = ColorMode.AUTO


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solarcat",
        description="Print files with syntax highlighting in 8-colour ANSI.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Files to print. Reads stdin if none are given or for '-'.",
    )
    parser.add_argument(
        "-l", "--lexer",
        help="Pygments lexer name. Guessed from file name and content by default.",
    )
    parser.add_argument(
        "--color",
        choices=[c.value for c in ColorMode],
        default="auto",
        help="When to use colour (default: auto).",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Open the first file in the interactive viewer.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show stack traces on error.",
    )
    return parser


def _read_source(name: str) -> tuple[Path | None, str]:
    """Read a file, or stdin for '-'. Invalid UTF-8 is replaced."""
    if name == "-":
        data = sys.stdin.buffer.read()
        return None, data.decode("utf-8", errors="replace")
    path = Path(name)
    return path, path.read_bytes().decode("utf-8", errors="replace")


def _fail(message: str, debug: bool) -> None:
    if debug:
        import traceback
        traceback.print_exc(file=sys.stderr)
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _run_print(files: list[str], settings: Settings, debug: bool) -> None:
    """Highlight each file and write it to stdout."""
    from solarcat.core.highlight import highlight, lexer_for
    from solarcat.core.palette import UnrecognizedColorError
    from solarcat.core.writer import write_as_ansi, write_plain

    out = sys.stdout.buffer
    colorize = should_colorize(settings.color_mode, sys.stdout)

    for name in files or ["-"]:
        try:
            path, code = _read_source(name)
        except OSError as e:
            _fail(f"Cannot read {name}: {e.strerror or e}", debug)

        try:
            lexer = lexer_for(path, code, settings.lexer)
        except ValueError as e:
            _fail(str(e), debug)

        regions = highlight(code, lexer)
        try:
            if colorize:
                write_as_ansi(out, regions)
            else:
                write_plain(out, regions)
            out.flush()
        except BrokenPipeError:
            # Reader went away (e.g. `| head`); silence the flush at exit.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
            sys.exit(1)
        except UnrecognizedColorError as e:
            _fail(str(e), debug)


def main(argv: list[str] | None = None) -> None:
    """Main entry point.

    Routing:
      solarcat [FILE ...]       -> print highlighted files to stdout
      solarcat --tui FILE       -> open FILE in the viewer
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = Settings(lexer=args.lexer, color_mode=ColorMode(args.color))

    if args.tui:
        if not args.files or args.files[0] == "-":
            parser.error("--tui needs a file path")
        from solarcat.app import run_app
        run_app(input_path=args.files[0], settings=settings)
        return

    _run_print(args.files, settings, args.debug)
