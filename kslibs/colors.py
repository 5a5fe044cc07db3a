"""ANSI terminal styling: SGR codes, colour control modes and styled output."""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Mapping
from enum import IntEnum
from typing import IO, Any


class Style(IntEnum):
    """Text style attributes."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RBLINK = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9


class Fg(IntEnum):
    """Foreground colours."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    RESET = 39


class Bg(IntEnum):
    """Background colours."""

    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    GRAY = 47
    RESET = 49


class FgBright(IntEnum):
    """Bright foreground colours."""

    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    GRAY = 97


class BgBright(IntEnum):
    """Bright background colours."""

    BLACK = 100
    RED = 101
    GREEN = 102
    YELLOW = 103
    BLUE = 104
    MAGENTA = 105
    CYAN = 106
    GRAY = 107


class Control(IntEnum):
    """How styling requests are honoured."""

    OFF = 0  # never emit escape sequences
    AUTO = 1  # emit them only on colour-capable terminals
    FORCE = 2  # always emit them


_STYLE_TYPES = (Style, Fg, Bg, FgBright, BgBright)

_COLOR_TERMS = (
    "ansi",
    "color",
    "console",
    "cygwin",
    "gnome",
    "konsole",
    "kterm",
    "linux",
    "msys",
    "putty",
    "rxvt",
    "screen",
    "vt100",
    "xterm",
)

_lock = threading.Lock()
_control_mode = Control.AUTO


def set_control_mode(mode: Control) -> None:
    """Set the process-wide colour control mode."""
    global _control_mode
    mode = Control(mode)
    with _lock:
        _control_mode = mode


def get_control_mode() -> Control:
    """Return the process-wide colour control mode."""
    with _lock:
        return _control_mode


def supports_color(environ: Mapping[str, str] | None = None) -> bool:
    """Tell whether the terminal named by ``TERM`` understands colours."""
    if sys.platform == "win32":
        return True
    env = os.environ if environ is None else environ
    term = env.get("TERM")
    if term is None:
        return False
    return any(name in term for name in _COLOR_TERMS)


def is_terminal(stream: Any) -> bool:
    """Tell whether ``stream`` is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def should_color(stream: Any) -> bool:
    """Decide, under the current control mode, whether to style ``stream``."""
    mode = get_control_mode()
    if mode is Control.FORCE:
        return True
    if mode is Control.AUTO:
        return supports_color() and is_terminal(stream)
    return False


def sgr(code: int) -> str:
    """Return the Select Graphic Rendition escape sequence for ``code``."""
    return f"\033[{int(code)}m"


_RESET_ALL = (Style.RESET, Fg.RESET, Bg.RESET)


def styled(*args: Any, stream: IO[str] | None = None) -> str:
    """Join ``args`` into one string, turning style members into escapes.

    With two or more arguments, a full reset of style and colours is
    appended. Escapes are dropped when ``stream`` should not be coloured.
    """
    target = sys.stdout if stream is None else stream
    color = should_color(target)
    items = list(args)
    if len(items) >= 2:
        items.extend(_RESET_ALL)
    parts = []
    for item in items:
        if isinstance(item, _STYLE_TYPES):
            if color:
                parts.append(sgr(item))
        else:
            parts.append(str(item))
    return "".join(parts)


def print_styled(*args: Any, stream: IO[str] | None = None) -> None:
    """Write ``styled(*args)`` followed by a newline to ``stream``."""
    target = sys.stdout if stream is None else stream
    if not args:
        return
    target.write(styled(*args, stream=target) + "\n")