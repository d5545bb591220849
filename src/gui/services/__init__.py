"""Service layer exports.

Responsibilities:
 - EventBus publish/subscribe core
 - Record normalization, sort engine and sort state controller
"""

from .event_bus import EventBus, GUIEvent  # noqa: F401
from .location_sort import sort_records, compare_records  # noqa: F401
from .record_normalizer import LocationRecordNormalizer  # noqa: F401
from .sort_state_controller import SortStateController, next_sort_state  # noqa: F401

__all__ = [
    "EventBus",
    "GUIEvent",
    "sort_records",
    "compare_records",
    "LocationRecordNormalizer",
    "SortStateController",
    "next_sort_state",
]
