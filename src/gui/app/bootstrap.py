"""Application bootstrap utilities for the location table.

Responsibilities:
 - Optional headless bootstrap (for tests / environments without PyQt6)
 - Creating the per-application EventBus and logging service
 - Loading the dataset (if given) into a fresh `LocationTableViewModel`
 - Providing a single returned context object with references

PyQt6 is imported lazily so headless callers and test collection work
without a display or without Qt installed.
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from config import settings
from gui.repositories.location_data_loader import load_location_records
from gui.services.event_bus import EventBus
from gui.services.logging_service import LoggingService
from gui.services.record_normalizer import LocationRecordNormalizer
from gui.viewmodels.location_table_viewmodel import LocationTableViewModel

__all__ = ["AppContext", "create_app", "qt_available"]

log = logging.getLogger(__name__)


def qt_available() -> bool:
    try:
        from PyQt6.QtWidgets import QApplication  # type: ignore  # noqa: F401
    except ImportError:
        return False
    return True


@dataclass
class AppContext:
    """Container with references created during bootstrap.

    Attributes
    ----------
    qt_app: The underlying QApplication instance (None if headless)
    headless: Whether headless bootstrap was used
    event_bus: Bus shared by view model, controller and view
    logging_service: Ring buffer of recent log records
    viewmodel: Table view model, already loaded when a data file was given
    duration_s: Total elapsed seconds for bootstrap
    metadata: Free-form details (data file, record count)
    """

    qt_app: Optional[Any]
    headless: bool
    event_bus: EventBus
    logging_service: LoggingService
    viewmodel: LocationTableViewModel
    duration_s: float
    metadata: dict[str, Any] = field(default_factory=dict)


def create_app(
    *,
    headless: bool | None = None,
    data_file: str | Path | None = None,
    strict_ids: bool | None = None,
    attach_logging: bool = True,
    trace_events: bool = False,
) -> AppContext:
    """Create and initialize the application context.

    Parameters
    ----------
    headless: Force headless (no QApplication). If None, inferred by Qt availability.
    data_file: Optional JSON dataset to load right away.
    strict_ids: Reject colliding record ids (defaults to settings.STRICT_RECORD_IDS).
    attach_logging: Attach the ring-buffer handler to the root logger.
    trace_events: Keep a ring buffer of recent bus events (see `EventBus.recent_traces`).
    """
    started = time.perf_counter()
    if headless is None:
        headless = not qt_available()
    if strict_ids is None:
        strict_ids = settings.STRICT_RECORD_IDS

    qt_app = None
    if not headless:
        from PyQt6.QtWidgets import QApplication  # type: ignore

        qt_app = QApplication.instance() or QApplication(sys.argv[:1])  # minimal argv
        qt_app.setApplicationName(settings.WINDOW_TITLE)

    bus = EventBus()
    if trace_events:
        bus.enable_tracing(True)
    logging_service = LoggingService(capacity=settings.LOG_CAPACITY, event_bus=bus)
    if attach_logging:
        logging_service.attach_root()

    viewmodel = LocationTableViewModel(
        LocationRecordNormalizer(strict=strict_ids), event_bus=bus
    )
    metadata: dict[str, Any] = {"data_file": None, "record_count": 0, "trace_events": trace_events}
    if data_file is not None:
        viewmodel.set_raw_rows(load_location_records(data_file))
        metadata["data_file"] = str(data_file)
        metadata["record_count"] = len(viewmodel.rows())

    duration = time.perf_counter() - started
    log.info("bootstrap finished in %.1f ms (headless=%s)", duration * 1000, headless)
    return AppContext(
        qt_app=qt_app,
        headless=headless,
        event_bus=bus,
        logging_service=logging_service,
        viewmodel=viewmodel,
        duration_s=duration,
        metadata=metadata,
    )
