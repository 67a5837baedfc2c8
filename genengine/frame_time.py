"""Frame delta time, time scale and frames-per-second tracking."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class _FrameClock:
    start: float = field(default_factory=time.perf_counter)
    delta: float = 0.0
    scale: float = 0.0


@dataclass
class _FpsCounter:
    update_delay: float = 0.5
    timer: float = 0.0
    fps: int = 0


_lock = threading.Lock()
_clock = _FrameClock()
_counter = _FpsCounter()


def update_delta_time() -> None:
    """Measure the time since the previous call, scaled by the time scale."""
    end = time.perf_counter()
    with _lock:
        _clock.delta = (end - _clock.start) * _clock.scale
        _clock.start = end


def set_time_scale(time_scale: float) -> None:
    """Set the factor applied to measured frame times."""
    with _lock:
        _clock.scale = float(time_scale)


def get_delta_time() -> float:
    """Return the scaled duration of the last frame in seconds."""
    with _lock:
        return _clock.delta


def get_time_scale() -> float:
    with _lock:
        return _clock.scale


def get_current_time() -> str:
    """Return the local wall-clock time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime(_TIME_FORMAT)


def set_fps_update_delay(update_delay: float) -> None:
    """Set how many (scaled) seconds pass between frames-per-second updates."""
    with _lock:
        _counter.update_delay = float(update_delay)


def update_fps() -> None:
    """Advance the update timer and refresh the frame rate once it expires.

    The frame rate is computed from the unscaled frame time; it is 0 when
    that time cannot be determined.
    """
    with _lock:
        delta = _clock.delta
        scale = _clock.scale
        _counter.timer += delta
        if _counter.timer >= _counter.update_delay:
            _counter.timer = 0.0
            unscaled = delta / scale if scale else 0.0
            _counter.fps = int(1.0 / unscaled) if unscaled > 0 else 0


def get_fps() -> int:
    with _lock:
        return _counter.fps