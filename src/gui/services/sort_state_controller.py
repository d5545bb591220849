"""Sort state controller.

Owns the active `SortState` of one table instance and is the only place it
changes. A toggle request for a column moves to:

 - `(column, ascending)` when a different column is requested
 - `(column, flipped direction)` when the active column is requested again

There is no terminal state. The transition itself is the pure function
`next_sort_state`; the controller wraps it with ownership, logging and
change notification.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from domain.models import SortColumn, SortDirection, SortState
from gui.services.event_bus import EventBus, GUIEvent

__all__ = ["SortStateController", "next_sort_state", "SortStateListener"]

log = logging.getLogger(__name__)

SortStateListener = Callable[[SortState], None]


def next_sort_state(state: SortState, column: SortColumn | str) -> SortState:
    requested = SortColumn.parse(column)
    if requested is state.column:
        return SortState(state.column, state.direction.flipped())
    return SortState(requested, SortDirection.ASCENDING)


class SortStateController:
    def __init__(
        self,
        initial: SortState | None = None,
        *,
        event_bus: Optional[EventBus] = None,
    ):
        self._state = initial or SortState.initial()
        self._bus = event_bus
        self._listeners: List[SortStateListener] = []

    @property
    def state(self) -> SortState:
        return self._state

    def add_listener(self, listener: SortStateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SortStateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def request_sort(self, column: SortColumn | str) -> SortState:
        """Apply a user toggle for `column` and return the new state.

        Raises `UnknownSortColumnError` (state untouched) for columns outside
        the enumeration.
        """
        new_state = next_sort_state(self._state, column)
        log.info(
            "sort %s %s -> %s %s",
            self._state.column.value,
            self._state.direction.value,
            new_state.column.value,
            new_state.direction.value,
        )
        self._replace(new_state)
        return new_state

    def reset(self) -> SortState:
        self._replace(SortState.initial())
        return self._state

    def _replace(self, state: SortState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        if self._bus is not None:
            self._bus.publish(GUIEvent.SORT_CHANGED, state.as_dict())
