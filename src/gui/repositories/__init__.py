"""Data access for the location table (JSON dataset loader)."""

from .location_data_loader import (  # noqa: F401
    load_location_records,
    parse_location_payload,
    parse_raw_record,
)

__all__ = ["load_location_records", "parse_location_payload", "parse_raw_record"]
