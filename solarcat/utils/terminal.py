"""Terminal colour support detection."""

from __future__ import annotations

import os
from enum import Enum
from typing import IO, Mapping


class ColorMode(str, Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def supports_color(
    stream: IO,
    environ: Mapping[str, str] = os.environ,
) -> bool:
    """Check whether ANSI colour should be written to a stream.

    Honours ``NO_COLOR`` and ``TERM=dumb``, then requires a TTY. Streams
    without ``isatty`` or already closed count as not a terminal.
    """
    if environ.get("NO_COLOR"):
        return False
    if environ.get("TERM") == "dumb":
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def should_colorize(mode: ColorMode, stream: IO) -> bool:
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False
    return supports_color(stream)
