"""A value that tells its subscribers when it changes."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """Holds a value and calls each subscriber with the new value on change."""

    def __init__(self, initial_value: T) -> None:
        self._value = initial_value
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if self._value != new_value:
            self._value = new_value
            for callback in self._subscribers:
                callback(new_value)

    def subscribe(self, callback: Callable[[T], None]) -> None:
        """Add ``callback`` to be called after each change."""
        self._subscribers.append(callback)