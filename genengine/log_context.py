"""Per-entry log context, thread identifiers and the sink interface."""

from __future__ import annotations

import itertools
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from genengine.log_level import Level

_id_counter = itertools.count()
_id_lock = threading.Lock()
_local = threading.local()


def get_thread_id() -> int:
    """Return this thread's logging id.

    Ids start at 0 and increase in the order threads first ask for one.
    """
    thread_id = getattr(_local, "thread_id", None)
    if thread_id is None:
        with _id_lock:
            thread_id = next(_id_counter)
        _local.thread_id = thread_id
    return thread_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Context:
    """Information about a single log entry, built where the entry is made."""

    category: str = ""
    timestamp: datetime = field(default_factory=_now)
    thread: int = 0
    level: Level = Level.ERROR
    func: Optional[str] = None
    file: Optional[str] = None
    line: Optional[int] = None

    @classmethod
    def make(
        cls,
        category: str,
        level: Level,
        function: Optional[str] = None,
        file_path: Optional[str] = None,
        line: Optional[int] = None,
    ) -> "Context":
        """Build a context stamped with the current time and thread id."""
        return cls(
            category=category,
            timestamp=_now(),
            thread=get_thread_id(),
            level=level,
            func=function,
            file=file_path,
            line=line,
        )


class Sink(ABC):
    """A destination that receives formatted log entries."""

    @abstractmethod
    def handle(self, formatted: str, context: Context) -> None:
        """Receive one formatted entry together with its context."""