"""Running tasks after a delay or at regular intervals."""

from __future__ import annotations

import time
from typing import Any, Callable

from ftpp.persistent_worker import PersistentWorker
from ftpp.thread import Thread


class Scheduler:
    """Schedules one-off delayed tasks and named repeating tasks."""

    def __init__(self) -> None:
        self._worker = PersistentWorker()
        self._one_time: list[Thread] = []

    def schedule_once(self, delay_ms: int, task: Callable[[], object]) -> None:
        """Run ``task`` once, ``delay_ms`` milliseconds from now."""

        def run() -> None:
            time.sleep(delay_ms / 1000)
            task()

        thread = Thread("OneTimeTask", run)
        thread.start()
        self._one_time.append(thread)

    def schedule_repeating(
        self, name: str, interval_ms: int, task: Callable[[], object]
    ) -> None:
        """Run ``task`` every ``interval_ms`` milliseconds under ``name``."""

        def run() -> None:
            time.sleep(interval_ms / 1000)
            task()

        self._worker.add_task(name, run)

    def cancel(self, name: str) -> None:
        """Stop the repeating task ``name``; KeyError if there is none."""
        self._worker.remove_task(name)

    def close(self) -> None:
        """Wait for one-off tasks to run and stop every repeating task."""
        for thread in self._one_time:
            thread.stop()
        self._worker.close()

    def __enter__(self) -> Scheduler:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()