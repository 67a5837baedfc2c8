"""Base class that allows at most one live instance per subclass."""

from __future__ import annotations

from typing import Optional, TypeVar

_T = TypeVar("_T", bound="MonoInstance")


class MonoInstance:
    """At most one instance of each subclass may exist at a time.

    Creating a second instance raises ``RuntimeError``; ``release`` (or leaving
    a ``with`` block) frees the slot again.
    """

    _instance: Optional["MonoInstance"] = None

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None

    def __init__(self) -> None:
        cls = type(self)
        if cls._instance is not None:
            raise RuntimeError("Instance already exists")
        cls._instance = self

    @classmethod
    def get_instance(cls: type[_T]) -> _T:
        """Return the live instance, raising ``RuntimeError`` if there is none."""
        if cls._instance is None:
            raise RuntimeError("Instance does not exist")
        return cls._instance  # type: ignore[return-value]

    @classmethod
    def exists(cls) -> bool:
        return cls._instance is not None

    def release(self) -> None:
        """Give up the instance slot held by this object."""
        cls = type(self)
        if cls._instance is self:
            cls._instance = None

    def __enter__(self: _T) -> _T:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()