"""A state machine with per-state actions and per-transition callbacks."""

from __future__ import annotations

from typing import Callable, Hashable


class StateMachine:
    """Tracks a current state, runs actions for it and callbacks on transitions.

    The first state added becomes the current state.
    """

    def __init__(self) -> None:
        self._states: set[Hashable] = set()
        self._actions: dict[Hashable, Callable[[], object]] = {}
        self._transitions: dict[Hashable, dict[Hashable, Callable[[], object]]] = {}
        self._current: Hashable = None
        self._initialized = False

    @property
    def current_state(self) -> Hashable:
        """The current state; RuntimeError if no state has been added."""
        self._require_initialized()
        return self._current

    def add_state(self, state: Hashable) -> None:
        """Register ``state``; the first one registered becomes current."""
        self._states.add(state)
        if not self._initialized:
            self._current = state
            self._initialized = True

    def add_transition(
        self,
        start_state: Hashable,
        final_state: Hashable,
        callback: Callable[[], object],
    ) -> None:
        """Allow moving from ``start_state`` to ``final_state``, calling ``callback``."""
        self._transitions.setdefault(start_state, {})[final_state] = callback

    def add_action(self, state: Hashable, callback: Callable[[], object]) -> None:
        """Set the action that :meth:`update` runs while in ``state``."""
        self._actions[state] = callback

    def transition_to(self, state: Hashable) -> None:
        """Run the transition callback to ``state`` and make it current.

        Raises RuntimeError before any state is added and ValueError when no
        transition from the current state to ``state`` is defined.
        """
        self._require_initialized()
        callback = self._transitions.get(self._current, {}).get(state)
        if callback is None:
            raise ValueError("No transition defined for this state")
        callback()
        self._current = state

    def update(self) -> None:
        """Run the action of the current state.

        Raises RuntimeError before any state is added and ValueError when the
        current state has no action.
        """
        self._require_initialized()
        action = self._actions.get(self._current)
        if action is None:
            raise ValueError("No action defined for this state")
        action()

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("State not initialized yet")