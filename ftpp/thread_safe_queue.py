"""A double-ended queue safe to share between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when popping from an empty queue."""


class ThreadSafeQueue(Generic[T]):
    """A deque whose operations are each performed under a lock."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def push_back(self, item: T) -> None:
        """Add ``item`` at the back."""
        with self._lock:
            self._items.append(item)

    def push_front(self, item: T) -> None:
        """Add ``item`` at the front."""
        with self._lock:
            self._items.appendleft(item)

    def pop_back(self) -> T:
        """Remove and return the last item; EmptyQueueError if there is none."""
        with self._lock:
            if not self._items:
                raise EmptyQueueError("Cannot pop from an empty queue.")
            return self._items.pop()

    def pop_front(self) -> T:
        """Remove and return the first item; EmptyQueueError if there is none."""
        with self._lock:
            if not self._items:
                raise EmptyQueueError("Cannot pop from an empty queue.")
            return self._items.popleft()