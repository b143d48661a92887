"""Base class for objects that save and restore their state as snapshots."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ftpp.data_buffer import DataBuffer

Snapshot = DataBuffer


class Memento(ABC):
    """Subclasses define how their state is written to and read from a snapshot."""

    def save(self) -> Snapshot:
        """Return a new snapshot holding the current state."""
        snapshot = Snapshot()
        self._save_to_snapshot(snapshot)
        return snapshot

    def load(self, snapshot: Snapshot) -> None:
        """Restore state from ``snapshot``, which is left unchanged."""
        self._load_from_snapshot(Snapshot(bytes(snapshot)))

    @abstractmethod
    def _save_to_snapshot(self, snapshot: Snapshot) -> None:
        """Write the object's state into ``snapshot``."""

    @abstractmethod
    def _load_from_snapshot(self, snapshot: Snapshot) -> None:
        """Read the object's state back from ``snapshot``."""