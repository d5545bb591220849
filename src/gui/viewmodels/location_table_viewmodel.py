"""ViewModel for the location table.

Takes raw location rows, runs them once through `LocationRecordNormalizer`
and keeps the display order in sync with the `SortStateController`: the
sort engine is re-run whenever either the record snapshot or the sort state
changes. Only the latest snapshot and state determine `rows()`.

When an EventBus is supplied the view model listens for `SORT_REQUESTED`
(payload: column name) and announces `RECORDS_LOADED` / `ROWS_RESORTED`.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from domain.models import LocationRecord, RawLocationRecord, SortColumn, SortState
from gui.services.event_bus import Event, EventBus, GUIEvent, Subscription
from gui.services.location_sort import sort_records
from gui.services.record_normalizer import LocationRecordNormalizer
from gui.services.sort_state_controller import SortStateController

__all__ = ["LocationTableViewModel"]

log = logging.getLogger(__name__)


class LocationTableViewModel:
    def __init__(
        self,
        normalizer: LocationRecordNormalizer | None = None,
        controller: SortStateController | None = None,
        *,
        event_bus: Optional[EventBus] = None,
    ):
        self._normalizer = normalizer or LocationRecordNormalizer()
        self.event_bus = event_bus
        self.controller = controller or SortStateController(event_bus=event_bus)
        self.controller.add_listener(self._on_sort_state_changed)
        self._records: List[LocationRecord] = []
        self._rows: List[LocationRecord] = []
        self._by_id: Dict[str, LocationRecord] = {}
        self._subscription: Subscription | None = None
        if event_bus is not None:
            self._subscription = event_bus.subscribe(GUIEvent.SORT_REQUESTED, self._on_sort_requested)

    # Input --------------------------------------------------------------
    def set_raw_rows(self, rows: Sequence[RawLocationRecord]) -> None:
        self.set_records(self._normalizer.normalize(rows))

    def set_records(self, records: Iterable[LocationRecord]) -> None:
        self._records = list(records)
        self._by_id = {r.id: r for r in self._records}
        if self.event_bus is not None:
            self.event_bus.publish(GUIEvent.RECORDS_LOADED, len(self._records))
        self._resort()

    # Sorting ------------------------------------------------------------
    @property
    def sort_state(self) -> SortState:
        return self.controller.state

    def request_sort(self, column: SortColumn | str) -> SortState:
        return self.controller.request_sort(column)

    def _on_sort_requested(self, event: Event) -> None:
        self.request_sort(event.payload)

    def _on_sort_state_changed(self, _state: SortState) -> None:
        self._resort()

    def _resort(self) -> None:
        self._rows = sort_records(self._records, self.controller.state)
        if self.event_bus is not None:
            self.event_bus.publish(GUIEvent.ROWS_RESORTED, len(self._rows))

    # Output -------------------------------------------------------------
    def rows(self) -> List[LocationRecord]:
        return list(self._rows)

    def record_by_id(self, record_id: str) -> LocationRecord | None:
        return self._by_id.get(record_id)

    def dispose(self) -> None:
        self.controller.remove_listener(self._on_sort_state_changed)
        if self.event_bus is not None and self._subscription is not None:
            self.event_bus.unsubscribe(self._subscription)
            self._subscription = None
