"""Named tasks that each run repeatedly on their own worker pool."""

from __future__ import annotations

import threading
from typing import Any, Callable

from ftpp.worker_pool import WorkerPool


class PersistentWorker:
    """Runs each named task over and over until it is removed."""

    def __init__(self) -> None:
        self._pools: dict[str, WorkerPool] = {}
        self._lock = threading.Lock()

    def add_task(self, name: str, job: Callable[[], object]) -> None:
        """Start running ``job`` repeatedly under ``name``."""
        with self._lock:
            pool = self._pools.get(name)
            if pool is None:
                pool = self._pools[name] = WorkerPool()
        pool.add_job(job)

    def remove_task(self, name: str) -> None:
        """Stop the task ``name``, waiting for a run in progress to finish.

        Raises KeyError if no task has that name.
        """
        with self._lock:
            pool = self._pools.pop(name, None)
        if pool is None:
            raise KeyError(f"Task not found: {name}")
        pool.close()

    def close(self) -> None:
        """Stop every task."""
        with self._lock:
            pools = list(self._pools.values())
            self._pools.clear()
        for pool in pools:
            pool.close()

    def __enter__(self) -> PersistentWorker:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()