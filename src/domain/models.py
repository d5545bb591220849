"""Domain models for the sortable location table.

Records are immutable once built; sorting selects a new ordering instead of
editing rows. `SortState` is likewise a value object that gets replaced on
every user toggle.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "Number",
    "RawLocationRecord",
    "LocationRecord",
    "ColumnKind",
    "SortColumn",
    "SortDirection",
    "SortState",
    "LocationTableError",
    "UnknownSortColumnError",
    "DuplicateRecordIdError",
    "LocationDataError",
]

Number = Union[int, float]


class LocationTableError(Exception):
    """Base class for errors raised by the location table core."""


class UnknownSortColumnError(LocationTableError, ValueError):
    """Raised when a sort is requested for a column outside `SortColumn`."""


class DuplicateRecordIdError(LocationTableError):
    """Raised by a strict normalizer when two rows derive the same id."""


class LocationDataError(LocationTableError):
    """Raised when raw input cannot be turned into records."""


@dataclass(frozen=True, slots=True)
class RawLocationRecord:
    """One observation as delivered by the data source (no identity yet)."""

    location: str
    month: int
    year: int
    total: Number


@dataclass(frozen=True, slots=True)
class LocationRecord:
    id: str
    location: str
    month: int
    year: int
    total: Number


class ColumnKind(str, Enum):
    STRING = "string"
    NUMERIC = "numeric"


class SortColumn(str, Enum):
    LOCATION = "location"
    MONTH = "month"
    YEAR = "year"
    TOTAL = "total"

    @property
    def kind(self) -> ColumnKind:
        if self is SortColumn.LOCATION:
            return ColumnKind.STRING
        return ColumnKind.NUMERIC

    @classmethod
    def parse(cls, value: "SortColumn | str") -> "SortColumn":
        """Return the member for `value` or raise `UnknownSortColumnError`."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(c.value for c in cls)
            raise UnknownSortColumnError(
                f"Unknown sort column {value!r} (expected one of: {allowed})"
            ) from None


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.ASCENDING:
            return SortDirection.DESCENDING
        return SortDirection.ASCENDING

    @property
    def is_ascending(self) -> bool:
        return self is SortDirection.ASCENDING

    @classmethod
    def parse(cls, value: "SortDirection | str") -> "SortDirection":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown sort direction {value!r} (expected ascending or descending)"
            ) from None


@dataclass(frozen=True, slots=True)
class SortState:
    column: SortColumn = SortColumn.LOCATION
    direction: SortDirection = SortDirection.ASCENDING

    def __post_init__(self) -> None:
        # Plain strings are accepted at construction but stored as members
        object.__setattr__(self, "column", SortColumn.parse(self.column))
        object.__setattr__(self, "direction", SortDirection.parse(self.direction))

    @classmethod
    def initial(cls) -> "SortState":
        return cls(SortColumn.LOCATION, SortDirection.ASCENDING)

    def as_dict(self) -> dict[str, str]:
        return {"column": self.column.value, "direction": self.direction.value}
