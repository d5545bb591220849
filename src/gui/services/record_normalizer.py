"""Location record normalization.

Takes raw rows (location, month, year, total) as delivered by the data
loader and attaches the derived row identity used for keying and
selection:

    id = "<location>-<month>-<year>"

The identity intentionally ignores `total`, so two rows sharing the
(location, month, year) triple collapse onto the same id. Such collisions
are reported (warning log) rather than silently fixed; a strict normalizer
raises `DuplicateRecordIdError` instead.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from domain.models import DuplicateRecordIdError, LocationRecord, RawLocationRecord

__all__ = ["LocationRecordNormalizer", "derive_record_id", "find_id_collisions"]

log = logging.getLogger(__name__)


def derive_record_id(location: str, month: int, year: int) -> str:
    return f"{location}-{month}-{year}"


def find_id_collisions(records: Iterable[LocationRecord]) -> Dict[str, int]:
    """Return ids occurring more than once, mapped to their occurrence count."""
    counts = Counter(r.id for r in records)
    return {rid: n for rid, n in counts.items() if n > 1}


class LocationRecordNormalizer:
    def __init__(self, strict: bool = False):
        self.strict = strict

    def normalize(self, rows: Sequence[RawLocationRecord]) -> List[LocationRecord]:
        normalized: List[LocationRecord] = []
        for raw in rows:
            normalized.append(
                LocationRecord(
                    id=derive_record_id(raw.location, raw.month, raw.year),
                    location=raw.location,
                    month=raw.month,
                    year=raw.year,
                    total=raw.total,
                )
            )
        collisions = find_id_collisions(normalized)
        if collisions:
            if self.strict:
                raise DuplicateRecordIdError(
                    "Derived record ids are not unique: "
                    + ", ".join(f"{rid} (x{n})" for rid, n in sorted(collisions.items()))
                )
            log.warning(
                "%d derived record id(s) collide; rows differing only in total share an id: %s",
                len(collisions),
                sorted(collisions),
            )
        log.debug("normalized %d location records", len(normalized))
        return normalized
