"""Event subscription and notification."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Hashable


class Observer:
    """Maps events to callbacks and calls them, in subscription order, on notify."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[Hashable, list[Callable[..., Any]]] = defaultdict(list)

    def subscribe(self, event: Hashable, callback: Callable[..., Any]) -> None:
        """Register ``callback`` to be called when ``event`` is notified."""
        self._subscribers[event].append(callback)

    def notify(self, event: Hashable, *args: Any) -> None:
        """Call every callback subscribed to ``event`` with ``args``."""
        for callback in self._subscribers.get(event, ()):
            callback(*args)