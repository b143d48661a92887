"""A stopwatch counting whole milliseconds."""

from __future__ import annotations

import time


class Chronometer:
    """Measures time between :meth:`start` and :meth:`stop`."""

    def __init__(self) -> None:
        self._running = False
        self._start = 0.0
        self._end = 0.0

    def start(self) -> None:
        """Start, or restart, measuring from now."""
        self._running = True
        self._start = time.monotonic()

    def stop(self) -> int:
        """Stop measuring and return the elapsed milliseconds."""
        if self._running:
            self._end = time.monotonic()
            self._running = False
        return self.elapsed()

    def elapsed(self) -> int:
        """Milliseconds elapsed so far, or up to the stop if stopped."""
        end = time.monotonic() if self._running else self._end
        return int((end - self._start) * 1000)