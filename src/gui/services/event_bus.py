"""EventBus core.

Synchronous publish/subscribe channel between the table core and its
rendering collaborator:

 - the view publishes `SORT_REQUESTED` (header toggle) and
   `SELECTION_CHANGED` (ids of the selected rows)
 - the view model publishes `SORT_CHANGED` and `ROWS_RESORTED` after every
   transition or record reload
 - the logging service publishes `LOG_RECORD_ADDED`

One failing handler doesn't break the publish cycle: the error is kept in
`errors` and logged. No Qt dependency so it stays usable headless.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Deque, Dict, List, Protocol, Tuple

__all__ = [
    "GUIEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]

log = logging.getLogger(__name__)


class GUIEvent(str, Enum):  # Using str subclass for easier JSON/UI usage
    SORT_REQUESTED = "sort_requested"
    SORT_CHANGED = "sort_changed"
    RECORDS_LOADED = "records_loaded"
    ROWS_RESORTED = "rows_resorted"
    SELECTION_CHANGED = "selection_changed"
    LOG_RECORD_ADDED = "log_record_added"


@dataclass
class Event:
    name: str  # matches GUIEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Synchronous event dispatcher with optional tracing.

    Handlers are invoked while the lock is NOT held (copy-first strategy) so
    a handler may publish or (un)subscribe recursively. When tracing is
    enabled a fixed-size ring buffer keeps (name, timestamp, summary) of
    recent events.
    """

    DEFAULT_TRACE_CAPACITY = 50

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []
        self._tracing_enabled: bool = False
        self._traces: Deque[Tuple[str, float, str]] = deque(maxlen=self.DEFAULT_TRACE_CAPACITY)

    @staticmethod
    def _key(name: str | GUIEvent) -> str:
        return name.value if isinstance(name, GUIEvent) else name

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(self, name: str | GUIEvent, handler: EventHandler) -> Subscription:
        key = self._key(name)
        sub = Subscription(event=key, handler=handler)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if bucket:
                self._subs[sub.event] = [s for s in bucket if s is not sub]
                if not self._subs[sub.event]:
                    self._subs.pop(sub.event, None)
        sub.active = False

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | GUIEvent, payload: Any = None) -> Event:
        key = self._key(name)
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
            if self._tracing_enabled:
                text = "-" if payload is None else str(payload)
                summary = text if len(text) <= 40 else text[:37] + "..."
                self._traces.append((evt.name, evt.timestamp, summary))
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - isolate handler failures
                with self._lock:
                    self._errors.append((evt, exc))
                # LOG_RECORD_ADDED handlers must not feed back into logging
                if key != GUIEvent.LOG_RECORD_ADDED.value:
                    log.exception("handler for %r failed", key)
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | GUIEvent) -> int:
        with self._lock:
            return len(self._subs.get(self._key(name), ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)

    # ------------------------------------------------------------------
    # Tracing
    # ------------------------------------------------------------------
    def enable_tracing(self, enabled: bool = True) -> None:
        with self._lock:
            self._tracing_enabled = enabled

    def recent_traces(self) -> list[Tuple[str, float, str]]:
        with self._lock:
            return list(self._traces)
