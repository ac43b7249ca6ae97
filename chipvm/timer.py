"""A countdown timer that decrements at 60 Hz."""

from __future__ import annotations

import time
from typing import Callable

TICK_NS = 1_000_000_000 // 60


class Timer:
    """An 8-bit value that counts down to zero at 60 Hz.

    ``clock`` returns the current time in nanoseconds.
    """

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self.value = 0
        self._last_update = clock()

    def update(self) -> None:
        """Apply every whole tick that has elapsed since the last update."""
        now = self._clock()
        ticks = (now - self._last_update) // TICK_NS
        if ticks <= 0:
            return
        self.value = max(0, self.value - ticks)
        self._last_update += ticks * TICK_NS