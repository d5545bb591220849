"""Location data loader.

Reads the table dataset from a JSON document shaped like::

    {"values": [{"location": "Leipzig", "month": 3, "year": 2024, "total": 12}, ...]}

and converts each entry into a `RawLocationRecord`. Shape and type checks
happen here so the normalizer and sort engine can assume well-typed input;
a malformed entry raises `LocationDataError` naming its index and field.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

from domain.models import LocationDataError, RawLocationRecord

__all__ = ["load_location_records", "parse_location_payload", "parse_raw_record"]

log = logging.getLogger(__name__)

_FIELDS = ("location", "month", "year", "total")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid measure
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_raw_record(item: Any, index: int = 0) -> RawLocationRecord:
    if not isinstance(item, Mapping):
        raise LocationDataError(f"values[{index}]: expected an object, got {type(item).__name__}")
    missing = [f for f in _FIELDS if f not in item]
    if missing:
        raise LocationDataError(f"values[{index}]: missing field(s) {', '.join(missing)}")
    location = item["location"]
    if not isinstance(location, str):
        raise LocationDataError(f"values[{index}].location: expected a string")
    for name in ("month", "year"):
        value = item[name]
        if not _is_number(value) or int(value) != value:
            raise LocationDataError(f"values[{index}].{name}: expected an integer")
    if not _is_number(item["total"]):
        raise LocationDataError(f"values[{index}].total: expected a number")
    return RawLocationRecord(
        location=location,
        month=int(item["month"]),
        year=int(item["year"]),
        total=item["total"],
    )


def parse_location_payload(payload: Any) -> List[RawLocationRecord]:
    """Convert a decoded `{"values": [...]}` document into raw records."""
    if not isinstance(payload, Mapping):
        raise LocationDataError("Dataset root must be an object with a 'values' list")
    values = payload.get("values")
    if not isinstance(values, list):
        raise LocationDataError("Dataset is missing the 'values' list")
    return [parse_raw_record(item, i) for i, item in enumerate(values)]


def load_location_records(path: str | Path) -> List[RawLocationRecord]:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise LocationDataError(f"Cannot read dataset {file_path}: {e}") from e
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise LocationDataError(f"Cannot parse dataset {file_path}: {e}") from e
    records = parse_location_payload(payload)
    log.info("loaded %d raw location records from %s", len(records), file_path)
    return records
