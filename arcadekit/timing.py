"""Frame timing: delta time between updates and frames per second."""

from __future__ import annotations

import time
from collections.abc import Callable


class TimeManager:
    """Measures the time between updates and counts frames per second."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self.clock = clock if clock is not None else time.perf_counter
        self.fps = 0
        self.delta_time = 0.0
        self.frame_time = 0.0
        self.frame_count = 0
        self._previous = 0.0

    def init(self) -> None:
        """Start measuring from the current moment."""
        self._previous = self.clock()
        self.delta_time = 0.0
        self.frame_time = 0.0
        self.frame_count = 0
        self.fps = 0

    def update(self) -> None:
        """Record one frame; refresh the frame rate once a second has gone by."""
        current = self.clock()
        self.delta_time = current - self._previous
        self._previous = current

        self.frame_time += self.delta_time
        self.frame_count += 1
        if self.frame_time >= 1.0:
            self.fps = int(self.frame_count / self.frame_time)
            self.frame_time = 0.0
            self.frame_count = 0


time_manager = TimeManager()