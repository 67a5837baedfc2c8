"""Logger configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import ClassVar

from genengine.fixed_string import FixedString
from genengine.log_level import Level, Target


class Timestamp(enum.Enum):
    """Whether timestamps are written in local time or UTC."""

    LOCAL = "local"
    UTC = "utc"


@dataclass
class Config:
    """Logger settings.

    ``format`` holds ``{key}`` placeholders; supported keys are level, thread,
    category, message, timestamp, func, file and line. Other text passes
    through unchanged. The format is limited to ``FORMAT_SIZE`` characters.
    """

    DEFAULT_FORMAT: ClassVar[str] = "[{level}][T{thread}] [{category}] {message} [{timestamp}]"
    VERBOSE_FORMAT: ClassVar[str] = (
        "[{level}][T{thread}] [{category}] {message} [{timestamp}] [F:{func}] [{file}:{line}]"
    )
    FORMAT_SIZE: ClassVar[int] = 128

    format: str = DEFAULT_FORMAT
    max_level: Level = Level.DEBUG
    category_max_levels: dict[str, Level] = field(default_factory=dict)
    level_targets: dict[Level, Target] = field(default_factory=dict)
    timestamp: Timestamp = Timestamp.LOCAL

    def __post_init__(self) -> None:
        self.format = FixedString(str(self.format), self.FORMAT_SIZE).view()

    def copy(self) -> "Config":
        """Return an independent copy of this configuration."""
        return replace(
            self,
            category_max_levels=dict(self.category_max_levels),
            level_targets=dict(self.level_targets),
        )