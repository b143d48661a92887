"""A holder for the single shared instance of a class."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Singleton(Generic[T]):
    """Creates at most one instance of ``cls`` and hands it out on request.

    Access is guarded by a lock, so concurrent calls to :meth:`instantiate`
    create the instance only once.
    """

    def __init__(self, cls: type[T]) -> None:
        self._cls = cls
        self._instance: T | None = None
        self._created = False
        self._lock = threading.Lock()

    def instance(self) -> T:
        """Return the managed instance.

        Raises RuntimeError if :meth:`instantiate` has not been called yet.
        """
        with self._lock:
            if not self._created:
                raise RuntimeError("Instance not yet created")
            return self._instance  # type: ignore[return-value]

    def instantiate(self, *args: Any, **kwargs: Any) -> None:
        """Create the instance from ``args`` and ``kwargs``.

        Raises RuntimeError if the instance already exists.
        """
        with self._lock:
            if self._created:
                raise RuntimeError("Instance already created")
            self._instance = self._cls(*args, **kwargs)
            self._created = True