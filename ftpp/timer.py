"""A countdown that reports when its duration has passed."""

from __future__ import annotations

import time


class Timer:
    """Measures whether ``duration_ms`` milliseconds have passed since the last reset."""

    def __init__(self, duration_ms: int) -> None:
        self.duration_ms = duration_ms
        self._start = time.monotonic()

    def reset(self) -> None:
        """Start counting again from now."""
        self._start = time.monotonic()

    def has_timed_out(self) -> bool:
        """True once the whole duration has elapsed."""
        elapsed_ms = int((time.monotonic() - self._start) * 1000)
        return elapsed_ms >= self.duration_ms