"""Semantic version packed into a single 32-bit integer."""

from __future__ import annotations

from dataclasses import dataclass

_U32_MASK = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class Version:
    """A semantic version, ordered by major, then minor, then patch."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def get_version(self) -> int:
        """Pack the version as ``major << 22 | minor << 12 | patch`` in 32 bits."""
        return ((self.major << 22) | (self.minor << 12) | self.patch) & _U32_MASK

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"