"""A thread-safe logger writing timestamped lines to a stream."""

from __future__ import annotations

import sys
import threading
from datetime import datetime
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity of a log message, from least to most severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class Logger:
    """Writes ``[timestamp] [LEVEL] message`` lines at or above ``min_level``.

    With no stream, lines go to the standard output in use at the time.
    """

    def __init__(
        self, stream: TextIO | None = None, min_level: LogLevel = LogLevel.DEBUG
    ) -> None:
        self._stream = stream
        self.min_level = min_level
        self._lock = threading.Lock()

    def log(self, level: LogLevel, message: str) -> None:
        """Write ``message`` if ``level`` is not below the minimum level."""
        if level < self.min_level:
            return
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] [{LogLevel(level).name}] {message}\n"
        with self._lock:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(line)
            stream.flush()