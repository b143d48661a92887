"""A pool of reusable objects with explicit and context-managed release."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class PooledObject(Generic[T]):
    """A handle on an object taken from a :class:`Pool`.

    The object goes back to the pool on :meth:`release` or when the
    ``with`` block using the handle ends.
    """

    def __init__(self, obj: T, pool: Pool[T]) -> None:
        self._obj: T | None = obj
        self._pool = pool
        self._released = False

    @property
    def value(self) -> T:
        if self._released:
            raise RuntimeError("Object has been released to the pool.")
        return self._obj  # type: ignore[return-value]

    def release(self) -> None:
        """Return the object to its pool; further calls do nothing."""
        if self._released:
            return
        self._released = True
        obj, self._obj = self._obj, None
        self._pool._release(obj)

    def __enter__(self) -> PooledObject[T]:
        return self

    def __exit__(self, *args: Any) -> None:
        self.release()


class Pool(Generic[T]):
    """Keeps a number of pre-built objects and hands them out on demand.

    ``factory`` builds the objects; it is called with no arguments when the
    pool grows, and with the arguments given to :meth:`acquire` when an object
    is handed out.
    """

    def __init__(self, factory: Callable[..., T]) -> None:
        self._factory = factory
        self._available: list[T] = []
        self._total = 0

    def __len__(self) -> int:
        return self._total

    def available(self) -> int:
        """Number of objects waiting in the pool."""
        return len(self._available)

    def resize(self, new_size: int) -> None:
        """Grow the pool to ``new_size`` or shrink it by dropping idle objects."""
        in_use = self._total - len(self._available)
        if new_size < in_use:
            raise ValueError("Cannot resize pool below the number of active objects.")
        while self._total < new_size:
            self._available.append(self._factory())
            self._total += 1
        while self._total > new_size and self._available:
            self._available.pop()
            self._total -= 1

    def acquire(self, *args: Any, **kwargs: Any) -> PooledObject[T]:
        """Take a slot from the pool, growing it by one if none is free."""
        if not self._available:
            self.resize(self._total + 1)
        self._available.pop()
        return PooledObject(self._factory(*args, **kwargs), self)

    def _release(self, obj: T) -> None:
        self._available.append(obj)