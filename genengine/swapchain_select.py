"""Selection of swapchain surface format, present mode, extent and image count."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from genengine.errors import VulkanError

U32_MAX = 0xFFFFFFFF

FORMAT_R8G8B8A8_SRGB = 43
FORMAT_B8G8R8A8_SRGB = 50

DESIRED_SRGB_FORMATS = (FORMAT_B8G8R8A8_SRGB, FORMAT_R8G8B8A8_SRGB)
DESIRED_IMAGE_COUNT = 3

Extent = Tuple[int, int]


class PresentMode(enum.IntEnum):
    """Presentation modes, numbered as the graphics API numbers them."""

    IMMEDIATE = 0
    MAILBOX = 1
    FIFO = 2
    FIFO_RELAXED = 3


class ColorSpace(enum.IntEnum):
    """Surface color spaces, numbered as the graphics API numbers them."""

    SRGB_NONLINEAR = 0
    DISPLAY_P3_NONLINEAR = 1000104001
    EXTENDED_SRGB_LINEAR = 1000104002
    HDR10_ST2084 = 1000104008


@dataclass(frozen=True)
class SurfaceFormat:
    """A pixel format paired with the color space it is presented in."""

    format: int
    color_space: ColorSpace = ColorSpace.SRGB_NONLINEAR


DESIRED_PRESENT_MODE = PresentMode.MAILBOX


def choose_surface_format(available_formats: Iterable[SurfaceFormat]) -> SurfaceFormat:
    """Return the first sRGB non-linear format among the supported sRGB formats.

    Raises ``VulkanError`` when no such format is available.
    """
    for candidate in available_formats:
        if candidate.color_space != ColorSpace.SRGB_NONLINEAR:
            continue
        if candidate.format in DESIRED_SRGB_FORMATS:
            return candidate
    raise VulkanError("Failed to find suitable surface format that supports SRGB!")


def choose_present_mode(
    available_modes: Iterable[PresentMode],
    preferred_mode: PresentMode = DESIRED_PRESENT_MODE,
) -> PresentMode:
    """Pick the preferred mode, else relaxed FIFO, else FIFO (always supported)."""
    have_relaxed_fifo = False
    for mode in available_modes:
        if mode == preferred_mode:
            return PresentMode(mode)
        if mode == PresentMode.FIFO_RELAXED:
            have_relaxed_fifo = True
    if have_relaxed_fifo:
        return PresentMode.FIFO_RELAXED
    return PresentMode.FIFO


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def choose_extent(
    current_extent: Extent,
    min_extent: Extent,
    max_extent: Extent,
    framebuffer_size: Extent,
) -> Extent:
    """Return the swapchain image size.

    When the surface reports an undefined size (width of ``U32_MAX``), the
    framebuffer size is clamped to the allowed range; otherwise the surface
    size is used as is.
    """
    if current_extent[0] != U32_MAX:
        return (current_extent[0], current_extent[1])
    width = framebuffer_size[0] & U32_MAX
    height = framebuffer_size[1] & U32_MAX
    return (
        _clamp(width, min_extent[0], max_extent[0]),
        _clamp(height, min_extent[1], max_extent[1]),
    )


def choose_image_count(min_image_count: int, max_image_count: int) -> int:
    """Aim for triple buffering within the surface's limits; a maximum of 0 means none."""
    upper = U32_MAX if max_image_count == 0 else max_image_count
    return _clamp(DESIRED_IMAGE_COUNT, min_image_count, upper)


def check_device_extension_support(
    available_extensions: Iterable[str],
    required_extensions: Sequence[str],
) -> bool:
    """Whether every required extension is found among the available ones.

    The check stops as soon as all required names have been seen; if the
    available list is exhausted first the result is ``False``.
    """
    remaining = set(required_extensions)
    for name in available_extensions:
        remaining.discard(name)
        if not remaining:
            return True
    return False


def int_to_semver(version: int) -> str:
    """Unpack a packed version number into ``major.minor.patch``."""
    major = (version >> 22) & 127
    minor = (version >> 12) & 1023
    patch = version & 4095
    return f"{major}.{minor}.{patch}"