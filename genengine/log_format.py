"""Rendering of log entries from a ``{key}`` format specification."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from genengine.log_config import Timestamp
from genengine.log_context import Context
from genengine.log_level import level_char

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_OPEN = "{"
_CLOSE = "}"


def format_timestamp(timestamp: datetime, mode: Timestamp = Timestamp.LOCAL) -> str:
    """Render ``timestamp`` as ``YYYY-MM-DD HH:MM:SS`` in local time or UTC."""
    if mode is Timestamp.UTC:
        moment = timestamp.astimezone(timezone.utc)
    else:
        moment = timestamp.astimezone()
    return moment.strftime(_TIME_FORMAT)


def _keyword(key: str, message: str, context: Context, mode: Timestamp) -> Optional[str]:
    """Return the text for a format key, or ``None`` if the key is unknown."""
    if key == "level":
        return level_char(context.level)
    if key == "thread":
        return str(int(context.thread))
    if key == "category":
        return context.category
    if key == "message":
        return message
    if key == "timestamp":
        return format_timestamp(context.timestamp, mode)
    if key == "func":
        return context.func or ""
    if key == "file":
        return context.file or ""
    if key == "line":
        return "" if context.line is None else str(context.line)
    return None


def format_entry(
    fmt: str,
    message: str,
    context: Context,
    timestamp_mode: Timestamp = Timestamp.LOCAL,
) -> str:
    """Expand the keys in ``fmt`` for one entry and end it with a newline.

    A ``{`` that does not start a known key is copied through unchanged.
    """
    out: list[str] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        current = fmt[pos]
        pos += 1
        if current == _OPEN:
            close = fmt.find(_CLOSE, pos)
            if close != -1:
                value = _keyword(fmt[pos:close], message, context, timestamp_mode)
                if value is not None:
                    out.append(value)
                    pos = close + 1
                    continue
        out.append(current)
    out.append("\n")
    return "".join(out)