"""ANSI colors for diagnostics printed to a terminal.

Colors are on only when stdout is a TTY. ``NO_COLOR`` turns them off and
``FORCE_COLOR`` turns them on regardless (https://no-color.org/).
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_CODES = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "green": "\033[32m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
}

ColorName = Literal["reset", "bold", "green", "cyan", "bright_red", "bright_green"]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _detect_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _detect_colors()


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap ``text`` in the given colors, or return it unchanged."""
    if not _USE_COLORS or not colors:
        return text
    prefix = "".join(_CODES[color] for color in colors)
    return f"{prefix}{text}{_CODES['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_ESCAPE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def location(text: str) -> str:
    return colorize(text, "cyan")


def hint(text: str) -> str:
    return colorize(text, "green")


def suggestion(text: str) -> str:
    return colorize(text, "bright_green", "bold")


def format_error_header(code: str | None, message: str) -> str:
    """``D-RUN-001: message`` with the code highlighted, or just the message."""
    if code:
        return f"{error_code(code)}: {message}"
    return message
