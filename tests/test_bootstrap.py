import json

import pytest

from domain.models import DuplicateRecordIdError
from gui.app.bootstrap import create_app
from gui.services.event_bus import EventBus


def _dataset(tmp_path, values):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"values": values}), encoding="utf-8")
    return path


def test_headless_bootstrap_without_data():
    ctx = create_app(headless=True, attach_logging=False)
    assert ctx.qt_app is None
    assert ctx.headless is True
    assert isinstance(ctx.event_bus, EventBus)
    assert ctx.viewmodel.rows() == []
    assert ctx.metadata["record_count"] == 0
    assert ctx.duration_s >= 0


def test_bootstrap_loads_dataset(tmp_path):
    path = _dataset(
        tmp_path,
        [
            {"location": "Leipzig", "month": 3, "year": 2023, "total": 40},
            {"location": "Berlin", "month": 1, "year": 2024, "total": 12},
        ],
    )
    ctx = create_app(headless=True, data_file=path, attach_logging=False)
    assert ctx.metadata["record_count"] == 2
    assert ctx.metadata["data_file"] == str(path)
    assert [r.location for r in ctx.viewmodel.rows()] == ["Berlin", "Leipzig"]
    assert ctx.viewmodel.event_bus is ctx.event_bus


def test_bootstrap_fresh_bus_each_time():
    a = create_app(headless=True, attach_logging=False)
    b = create_app(headless=True, attach_logging=False)
    assert a.event_bus is not b.event_bus


def test_strict_ids_reject_collisions(tmp_path):
    path = _dataset(
        tmp_path,
        [
            {"location": "X", "month": 1, "year": 2020, "total": 1},
            {"location": "X", "month": 1, "year": 2020, "total": 2},
        ],
    )
    with pytest.raises(DuplicateRecordIdError):
        create_app(headless=True, data_file=path, strict_ids=True, attach_logging=False)


def test_logging_attached_records_bootstrap(tmp_path):
    ctx = create_app(headless=True)
    try:
        assert any("bootstrap finished" in e.message for e in ctx.logging_service.recent())
    finally:
        ctx.logging_service.detach_root()


def test_trace_events_records_bus_traffic(tmp_path):
    path = _dataset(tmp_path, [{"location": "Leipzig", "month": 3, "year": 2023, "total": 40}])
    ctx = create_app(headless=True, data_file=path, attach_logging=False, trace_events=True)
    names = [name for name, _, _ in ctx.event_bus.recent_traces()]
    assert "records_loaded" in names
    assert "rows_resorted" in names
    assert ctx.metadata["trace_events"] is True


def test_tracing_off_by_default():
    ctx = create_app(headless=True, attach_logging=False)
    ctx.viewmodel.request_sort("total")
    assert ctx.event_bus.recent_traces() == []
