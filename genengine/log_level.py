"""Log levels and log targets."""

from __future__ import annotations

import enum


class Level(enum.IntEnum):
    """Log level; a larger value is more verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


_LEVEL_CHARS = {
    Level.ERROR: "E",
    Level.WARN: "W",
    Level.INFO: "I",
    Level.DEBUG: "D",
}


def level_char(level) -> str:
    """Single-character form of a level, or ``'?'`` for an unknown one."""
    try:
        return _LEVEL_CHARS[Level(level)]
    except (ValueError, KeyError):
        return "?"


class Target(enum.IntFlag):
    """Destinations a log entry can be sent to."""

    CONSOLE = 1 << 0
    FILE = 1 << 1
    SINKS = 1 << 2
    ALL = 0xFFFFFFFF