"""A pool of threads that keep running the jobs given to it."""

from __future__ import annotations

import os
import threading
from typing import Any, Callable

from ftpp.thread_safe_queue import EmptyQueueError, ThreadSafeQueue

_IDLE_WAIT = 0.001


class WorkerPool:
    """Worker threads that take jobs from a shared queue and run them.

    A job is not used up by running it: after a worker runs a job it puts it
    back at the front of the queue, so jobs are run again and again until
    the pool is closed.
    """

    def __init__(self, num_threads: int | None = None) -> None:
        if num_threads is None:
            num_threads = os.cpu_count() or 1
        if num_threads < 0:
            raise ValueError("The number of threads cannot be negative.")
        self._jobs: ThreadSafeQueue[Callable[[], object]] = ThreadSafeQueue()
        self._stop = threading.Event()
        self._workers = [
            threading.Thread(target=self._work, name=f"worker-{index}", daemon=True)
            for index in range(num_threads)
        ]
        for worker in self._workers:
            worker.start()

    def add_job(self, job: Callable[[], object]) -> None:
        """Queue ``job`` to be run by the workers."""
        self._jobs.push_back(job)

    def close(self) -> None:
        """Stop the workers and wait for them to finish their current job."""
        self._stop.set()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _work(self) -> None:
        while not self._stop.is_set():
            try:
                job = self._jobs.pop_front()
            except EmptyQueueError:
                self._stop.wait(_IDLE_WAIT)
                continue
            job()
            self._jobs.push_front(job)