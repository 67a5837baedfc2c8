"""Category loggers that route entries to the live logger instance."""

from __future__ import annotations

from typing import Optional

from genengine.log_context import Context
from genengine.log_instance import Instance
from genengine.log_level import Level


def print_entry(
    level: Level,
    category: str,
    message: str,
    function: Optional[str] = None,
    file_path: Optional[str] = None,
    line: Optional[int] = None,
) -> None:
    """Send one message to the live logger instance, if there is one."""
    Instance.emit(message, Context.make(category, level, function, file_path, line))


class Logger:
    """Logs messages under a fixed category.

    Messages are ``str.format`` templates filled with the positional arguments.
    """

    Level = Level

    def __init__(self, category: str) -> None:
        self._category = category or "unknown"

    @property
    def category(self) -> str:
        return self._category

    def __repr__(self) -> str:
        return f"Logger({self._category!r})"

    def _emit(self, level: Level, fmt: str, args: tuple) -> None:
        print_entry(level, self._category, fmt.format(*args))

    def _emit_verbose(self, level: Level, function: str, file_path: str, line: int, fmt: str, args: tuple) -> None:
        print_entry(level, self._category, fmt.format(*args), function, file_path, line)

    def error(self, fmt: str, *args) -> None:
        self._emit(Level.ERROR, fmt, args)

    def warn(self, fmt: str, *args) -> None:
        self._emit(Level.WARN, fmt, args)

    def info(self, fmt: str, *args) -> None:
        self._emit(Level.INFO, fmt, args)

    def log(self, fmt: str, *args) -> None:
        """Same as ``info``."""
        self.info(fmt, *args)

    def debug(self, fmt: str, *args) -> None:
        self._emit(Level.DEBUG, fmt, args)

    def verbose_error(self, function: str, file_path: str, line: int, fmt: str, *args) -> None:
        self._emit_verbose(Level.ERROR, function, file_path, line, fmt, args)

    def verbose_warn(self, function: str, file_path: str, line: int, fmt: str, *args) -> None:
        self._emit_verbose(Level.WARN, function, file_path, line, fmt, args)

    def verbose_info(self, function: str, file_path: str, line: int, fmt: str, *args) -> None:
        self._emit_verbose(Level.INFO, function, file_path, line, fmt, args)

    def verbose_log(self, function: str, file_path: str, line: int, fmt: str, *args) -> None:
        """Same as ``verbose_info``."""
        self.verbose_info(function, file_path, line, fmt, *args)

    def verbose_debug(self, function: str, file_path: str, line: int, fmt: str, *args) -> None:
        self._emit_verbose(Level.DEBUG, function, file_path, line, fmt, args)


general = Logger("general")