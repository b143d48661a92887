"""Line-buffered console output that is safe to share between threads."""

from __future__ import annotations

import sys
import threading
from typing import Any, Callable, TextIO, TypeVar

R = TypeVar("R")


class ThreadSafeIOStream:
    """Collects output per thread and writes whole lines under a lock.

    Each thread has its own buffer and its own prefix; a line reaches the
    output only when :meth:`end_line` is called, prefixed by the thread's
    prefix. Reads take the same lock.
    """

    def __init__(self, output: TextIO | None = None, input: TextIO | None = None) -> None:
        self._output = output
        self._input = input
        self._lock = threading.Lock()
        self._local = threading.local()

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    def _parts(self) -> list[str]:
        parts = getattr(self._local, "parts", None)
        if parts is None:
            parts = self._local.parts = []
        return parts

    def set_prefix(self, prefix: str) -> None:
        """Set the prefix put in front of lines written by the calling thread."""
        self._local.prefix = prefix

    def write(self, *args: Any) -> ThreadSafeIOStream:
        """Append the text of each argument to the calling thread's line."""
        self._parts().extend(str(arg) for arg in args)
        return self

    def end_line(self) -> ThreadSafeIOStream:
        """Write the calling thread's pending line, with its prefix, and clear it."""
        parts = self._parts()
        line = getattr(self._local, "prefix", "") + "".join(parts) + "\n"
        parts.clear()
        with self._lock:
            out = self._out
            out.write(line)
            out.flush()
        return self

    def print(self, *args: Any) -> ThreadSafeIOStream:
        """Write ``args`` and end the line."""
        return self.write(*args).end_line()

    def read(self, convert: Callable[[str], R] = str) -> R:  # type: ignore[assignment]
        """Read the next whitespace-separated token and pass it to ``convert``.

        Raises EOFError when the input ends before a token is found.
        """
        with self._lock:
            token = self._next_token()
        return convert(token)

    def _next_token(self) -> str:
        source = self._in
        char = source.read(1)
        while char and char.isspace():
            char = source.read(1)
        chars = []
        while char and not char.isspace():
            chars.append(char)
            char = source.read(1)
        if not chars:
            raise EOFError("No input left to read.")
        return "".join(chars)