"""Engine errors that log their message when raised."""

from __future__ import annotations

from typing import ClassVar

from genengine.logger import Logger


class _LoggedError(RuntimeError):
    """A runtime error that writes its message to the log on creation."""

    category: ClassVar[str] = "unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        Logger(self.category).error("{}", message)


class VulkanError(_LoggedError):
    """A failure reported by the Vulkan layer; logged under ``vulkan``."""

    category = "vulkan"


class GraphicsError(_LoggedError):
    """A rendering failure; logged under ``graphics``."""

    category = "graphics"


class WindowingError(_LoggedError):
    """A window system failure; logged under ``windowing``."""

    category = "windowing"