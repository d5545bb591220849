import logging

import pytest

from gui.services.event_bus import EventBus, GUIEvent
from gui.services.logging_service import LoggingService


@pytest.fixture()
def setup_logging():
    bus = EventBus()
    svc = LoggingService(capacity=5, event_bus=bus)
    svc.attach_root()
    yield svc, bus
    svc.detach_root()


def test_logging_capture_and_retrieve(setup_logging):
    svc, _ = setup_logging
    logging.getLogger("alpha").info("Hello World")
    assert any(e.message == "Hello World" for e in svc.recent())


def test_logging_capacity_eviction(setup_logging):
    svc, _ = setup_logging
    for i in range(10):
        logging.getLogger("cap").info("M%d", i)
    recents = svc.recent()
    assert len(recents) == 5
    assert recents[0].message == "M5"
    assert [e.message for e in svc.recent(limit=2)] == ["M8", "M9"]


def test_logging_filtering(setup_logging):
    svc, _ = setup_logging
    logging.getLogger("gui.services.location_sort").debug("sorted")
    logging.getLogger("gui.repositories.loader").info("loaded")
    info_only = svc.filter(level="INFO")
    assert info_only and all(e.level == "INFO" for e in info_only)
    repo = svc.filter(name_contains="repositories")
    assert repo and all("repositories" in e.name for e in repo)


def test_logging_event_emission(setup_logging):
    svc, bus = setup_logging
    received = []
    bus.subscribe(GUIEvent.LOG_RECORD_ADDED, lambda e: received.append(e.payload))
    logging.getLogger("emit").warning("careful")
    assert received and received[-1]["message"] == "careful"
    assert received[-1]["level"] == "WARNING"


def test_detach_stops_capture(setup_logging):
    svc, _ = setup_logging
    svc.detach_root()
    svc.clear()
    logging.getLogger("after").warning("ignored")
    assert svc.recent() == []
