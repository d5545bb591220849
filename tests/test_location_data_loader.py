import json

import pytest

from domain.models import LocationDataError, RawLocationRecord
from gui.repositories.location_data_loader import (
    load_location_records,
    parse_location_payload,
    parse_raw_record,
)


def _write(tmp_path, payload):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_values_list(tmp_path):
    path = _write(
        tmp_path,
        {
            "values": [
                {"location": "Leipzig", "month": 3, "year": 2023, "total": 40},
                {"location": "Berlin", "month": 1, "year": 2024, "total": 12.5},
            ]
        },
    )
    rows = load_location_records(path)
    assert rows == [
        RawLocationRecord("Leipzig", 3, 2023, 40),
        RawLocationRecord("Berlin", 1, 2024, 12.5),
    ]


def test_extra_fields_ignored_and_integral_floats_accepted():
    row = parse_raw_record({"location": "X", "month": 2.0, "year": 2020, "total": 1, "note": "x"})
    assert row == RawLocationRecord("X", 2, 2020, 1)
    assert isinstance(row.month, int)


@pytest.mark.parametrize(
    "item,match",
    [
        ({"location": "X", "month": 1, "year": 2020}, "missing field"),
        ({"location": 5, "month": 1, "year": 2020, "total": 1}, "location"),
        ({"location": "X", "month": "1", "year": 2020, "total": 1}, "month"),
        ({"location": "X", "month": 1.5, "year": 2020, "total": 1}, "month"),
        ({"location": "X", "month": 1, "year": 2020, "total": True}, "total"),
        (["X", 1, 2020, 1], "expected an object"),
    ],
)
def test_malformed_records_rejected(item, match):
    with pytest.raises(LocationDataError, match=match):
        parse_raw_record(item, 4)


def test_error_names_index():
    with pytest.raises(LocationDataError, match=r"values\[1\]"):
        parse_location_payload({"values": [{"location": "X", "month": 1, "year": 2020, "total": 1}, {}]})


@pytest.mark.parametrize("payload", [[], {"rows": []}, {"values": {}}])
def test_payload_shape_checked(payload):
    with pytest.raises(LocationDataError):
        parse_location_payload(payload)


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LocationDataError, match="Cannot parse"):
        load_location_records(path)


def test_missing_file(tmp_path):
    with pytest.raises(LocationDataError, match="Cannot read"):
        load_location_records(tmp_path / "absent.json")
