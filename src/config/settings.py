"""Global configuration and constants for the location table."""

from __future__ import annotations

import os
from typing import Final

DATA_FILE: Final = os.environ.get("LOCATION_TABLE_DATA_FILE", "data.json")
LOG_LEVEL: Final = os.environ.get("LOCATION_TABLE_LOG_LEVEL", "INFO").upper()
LOG_CAPACITY: Final = 500  # records kept by the in-process logging service

# Reject colliding derived ids instead of only warning about them
STRICT_RECORD_IDS: Final = os.environ.get("LOCATION_TABLE_STRICT_IDS", "").lower() in (
    "1",
    "true",
    "yes",
)

WINDOW_TITLE: Final = "Locations"
COLUMN_LABELS: Final = {
    "location": "Location",
    "month": "Month",
    "year": "Year",
    "total": "Total",
}
