"""A string with a fixed maximum capacity; longer text is truncated."""

from __future__ import annotations

FIXED_STRING_CAPACITY = 64


class FixedString:
    """Immutable text holding at most ``capacity`` characters."""

    __slots__ = ("_text", "_capacity")

    def __init__(self, text: str = "", capacity: int = FIXED_STRING_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._text = text[:capacity]

    @property
    def capacity(self) -> int:
        return self._capacity

    def view(self) -> str:
        """Return the stored text."""
        return self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedString):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"FixedString({self._text!r}, capacity={self._capacity})"