"""The process-wide logger instance with console, file and custom sinks."""

from __future__ import annotations

import os
import sys
import threading
from typing import ClassVar, Optional

from genengine.log_config import Config
from genengine.log_context import Context, Sink
from genengine.log_format import format_entry
from genengine.log_level import Level, Target

DEFAULT_LOG_FILE = "genesis.log"


class DuplicateError(RuntimeError):
    """Raised when a second logger instance is created while one is live."""


class ConsoleSink(Sink):
    """Writes errors to standard error and everything else to standard output."""

    def handle(self, formatted: str, context: Context) -> None:
        stream = sys.stderr if context.level == Level.ERROR else sys.stdout
        stream.write(formatted)
        stream.flush()


class FileSink(Sink):
    """Appends entries to a file from a background writer thread.

    Any existing file at ``path`` is removed when the sink is created.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._buffer: list[str] = []
        self._cond = threading.Condition()
        self._stop = False
        if os.path.exists(path):
            os.remove(path)
        self._thread = threading.Thread(target=self._run, name="log-file-writer", daemon=True)
        self._thread.start()

    def _write(self, data: str) -> None:
        with open(self.path, "ab") as handle:
            handle.write(data.encode("utf-8"))

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: bool(self._buffer) or self._stop)
                data = "".join(self._buffer)
                self._buffer.clear()
                stopping = self._stop
            if data:
                self._write(data)
            if stopping:
                break

    def handle(self, formatted: str, context: Context) -> None:
        with self._cond:
            if not self._stop:
                self._buffer.append(formatted)
                self._cond.notify()
                return
        self._write(formatted)

    def close(self) -> None:
        """Stop the writer thread after everything buffered has been written."""
        with self._cond:
            self._stop = True
            self._cond.notify()
        self._thread.join()
        with self._cond:
            remaining = "".join(self._buffer)
            self._buffer.clear()
        if remaining:
            self._write(remaining)


class Instance:
    """The single live logger; entries are routed through it.

    Use it as a context manager, or call ``close`` when done.
    """

    _current: ClassVar[Optional["Instance"]] = None

    def __init__(self, file_path: Optional[str] = DEFAULT_LOG_FILE, config: Optional[Config] = None) -> None:
        if Instance._current is not None:
            raise DuplicateError("Duplicate logger Instance")
        path = file_path or DEFAULT_LOG_FILE
        self._lock = threading.Lock()
        self._sinks: list[Sink] = []
        self._config = (config or Config()).copy()
        self._console = ConsoleSink()
        self._file = FileSink(path)
        self._closed = False
        Instance._current = self
        self._print(f"logging to file: {path}", Context.make("logger", Level.INFO))

    def get_config(self) -> Config:
        """Return a copy of the configuration in use."""
        with self._lock:
            return self._config.copy()

    def set_config(self, config: Config) -> None:
        """Replace the configuration in use."""
        with self._lock:
            self._config = config.copy()

    def add_sink(self, sink: Optional[Sink]) -> None:
        """Add a custom sink; ``None`` is ignored."""
        if sink is None:
            return
        with self._lock:
            self._sinks.append(sink)

    def close(self) -> None:
        """Stop routing entries here and flush the log file."""
        if self._closed:
            return
        self._closed = True
        if Instance._current is self:
            Instance._current = None
        self._file.close()

    def __enter__(self) -> "Instance":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def emit(message: str, context: Context) -> None:
        """Route an entry to the live instance; does nothing if there is none."""
        current = Instance._current
        if current is None:
            return
        current._print(message, context)

    def _print(self, message: str, context: Context) -> None:
        with self._lock:
            config = self._config
            limit = config.category_max_levels.get(context.category)
            if limit is not None:
                if context.level > limit:
                    return
            elif context.level > config.max_level:
                return
            target = config.level_targets.get(context.level, Target.ALL)
            fmt = config.format
            mode = config.timestamp
            sinks_empty = not self._sinks

        formatted = format_entry(fmt, message, context, mode)

        if target & Target.CONSOLE == Target.CONSOLE:
            self._console.handle(formatted, context)
        if target & Target.FILE == Target.FILE:
            self._file.handle(formatted, context)
        if target & Target.SINKS == Target.SINKS and not sinks_empty:
            with self._lock:
                for sink in self._sinks:
                    sink.handle(formatted, context)