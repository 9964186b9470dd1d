"""Frame timing."""

from __future__ import annotations

import time
from collections.abc import Callable

_NANOS_PER_SECOND = 1_000_000_000


class Timer:
    """Measures the time between frames against a target frame rate.

    ``clock`` returns a monotonic time in nanoseconds.
    """

    def __init__(self, fps_target: int, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        if fps_target <= 0:
            raise ValueError(f"fps_target must be positive, got {fps_target}")
        self._clock = clock
        self._last_frame = clock()
        self.target_frame_time_ns = _NANOS_PER_SECOND // fps_target

    def delta_time(self) -> float:
        """Seconds since the previous call; starts a new frame."""
        now = self._clock()
        delta = now - self._last_frame
        self._last_frame = now
        return delta / _NANOS_PER_SECOND

    def should_update(self) -> bool:
        """Whether a whole target frame time has passed since the last frame."""
        return self._clock() - self._last_frame >= self.target_frame_time_ns

    def get_delta_time(self) -> float:
        """Seconds since the previous call; starts a new frame."""
        return self.delta_time()