"""A named thread that can be started and stopped explicitly."""

from __future__ import annotations

import threading
from typing import Callable

from ftpp.thread_safe_iostream import ThreadSafeIOStream


class Thread:
    """Runs ``func`` on its own thread between :meth:`start` and :meth:`stop`.

    When ``stream`` is given, the thread's output prefix on it is set to
    ``"[name] "`` before ``func`` runs.
    """

    def __init__(
        self,
        name: str,
        func: Callable[[], object],
        stream: ThreadSafeIOStream | None = None,
    ) -> None:
        self.name = name
        self._func = func
        self._stream = stream
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """True between a start and the matching stop."""
        return self._thread is not None

    def start(self) -> None:
        """Start the thread; does nothing if it is already running."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name=self.name)
        self._thread.start()

    def stop(self) -> None:
        """Wait for the thread to finish; does nothing if it is not running."""
        if self._thread is None:
            return
        self._thread.join()
        self._thread = None

    def _run(self) -> None:
        if self._stream is not None:
            self._stream.set_prefix(f"[{self.name}] ")
        self._func()