"""Frame timer: delta time between updates and frames per second."""

from __future__ import annotations

import time
from typing import Callable


def _in_seconds(duration: float) -> float:
    # Durations are measured with microsecond resolution.
    return int(duration * 1_000_000) / 1_000_000


class Timer:
    """Measures the time between successive updates and counts frames per second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        now = self._clock()
        self._last = now
        self._last_fps_time = now
        self._elapsed = 0.0
        self._counter = 0
        self._fps = 0

    def update(self) -> None:
        current = self._clock()
        self._elapsed = _in_seconds(current - self._last)
        self._last = current

        self._counter += 1
        if _in_seconds(current - self._last_fps_time) > 1.0:
            self._fps = self._counter
            self._counter = 0
            self._last_fps_time = current

    @property
    def delta_time(self) -> float:
        """Seconds between the last two updates."""
        return self._elapsed

    @property
    def fps(self) -> int:
        """Updates counted during the last full second."""
        return self._fps