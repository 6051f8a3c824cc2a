"""Frame and elapsed time measurement."""

from __future__ import annotations

from time import perf_counter
from typing import Callable


class Time:
    """Tracks time since start and time between ticks, in seconds."""

    def __init__(self, clock: Callable[[], float] = perf_counter) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._frame = now
        self.time = 0.0
        self.delta_time = 0.0

    def tick(self) -> None:
        """Update the total time and the time since the previous tick."""
        now = self._clock()
        self.time = now - self._start
        self.delta_time = now - self._frame
        self._frame = now

    def reset(self) -> None:
        """Restart the total-time measurement."""
        self._start = self._clock()

    def elapsed_time(self) -> float:
        """Return the seconds since construction or the last reset."""
        return self._clock() - self._start