"""Location table GUI public API.

Curated, intentionally small surface for callers (entry point, tests):
the event bus, the sort engine and the view model. Importing this package
does not import PyQt6; the Qt view lives in `gui.views`.
"""

from __future__ import annotations

from .services.event_bus import (  # noqa: F401
    EventBus,
    GUIEvent,
    Event,
)
from .services.location_sort import sort_records, compare_records  # noqa: F401
from .services.sort_state_controller import SortStateController, next_sort_state  # noqa: F401
from .viewmodels.location_table_viewmodel import LocationTableViewModel  # noqa: F401

__all__ = [
    "EventBus",
    "GUIEvent",
    "Event",
    "sort_records",
    "compare_records",
    "SortStateController",
    "next_sort_state",
    "LocationTableViewModel",
]
