"""Sort engine for location records.

Ordering for a given `SortState`:

1. Primary key = the selected column, in the selected direction. The column
   kind (string vs numeric) is resolved once per call, not per row pair.
2. Tie-break chain, independent of the primary direction:
   location ascending, then year descending, then month descending.
3. Anything still tied keeps its input order (stable sort).

The chain is always appended after the primary key, also when the primary
column is itself `location`, `year` or `month`. For those columns the
repeated comparison is redundant but harmless.

Strings are compared with a single collation rule: accents stripped and
case folded first, then lowercase before uppercase ("leipzig" < "Leipzig"),
then the raw text so that only equal strings compare equal.
"""

from __future__ import annotations

import logging
import unicodedata
from functools import lru_cache
from typing import Iterable, List, Tuple

from domain.models import ColumnKind, LocationRecord, SortColumn, SortState
from gui.services.multi_column_sort import MultiColumnSorter, SortKey, compare_rows

__all__ = [
    "collation_key",
    "tie_break_keys",
    "sort_keys_for",
    "sort_records",
    "compare_records",
]

log = logging.getLogger(__name__)


@lru_cache(maxsize=4096)
def collation_key(text: str) -> Tuple[str, str, str]:
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    # swapcase puts lowercase before uppercase on a case-only tie
    return folded, text.swapcase(), text


def _primary_key(column: SortColumn, ascending: bool) -> SortKey:
    kind = column.kind
    attr = column.value
    if kind is ColumnKind.STRING:
        return SortKey(lambda r: collation_key(getattr(r, attr)), ascending, attr)
    if kind is ColumnKind.NUMERIC:
        return SortKey(lambda r: getattr(r, attr), ascending, attr)
    raise AssertionError(f"unhandled column kind: {kind!r}")  # pragma: no cover


def tie_break_keys() -> List[SortKey]:
    return [
        SortKey(lambda r: collation_key(r.location), True, "location"),
        SortKey(lambda r: r.year, False, "year"),
        SortKey(lambda r: r.month, False, "month"),
    ]


def sort_keys_for(state: SortState) -> List[SortKey]:
    """Full key chain (primary first) for `state`."""
    column = SortColumn.parse(state.column)
    return [_primary_key(column, state.direction.is_ascending), *tie_break_keys()]


def sort_records(records: Iterable[LocationRecord], state: SortState) -> List[LocationRecord]:
    """Return a new list of `records` ordered for `state`; the input is untouched."""
    keys = sort_keys_for(state)
    ordered = MultiColumnSorter(records).sort(keys)
    log.debug(
        "sorted %d records by %s (%s)",
        len(ordered),
        keys[0].name,
        "asc" if keys[0].ascending else "desc",
    )
    return ordered


def compare_records(a: LocationRecord, b: LocationRecord, state: SortState) -> int:
    """Pairwise comparator consistent with `sort_records` (-1, 0 or 1)."""
    return compare_rows(a, b, sort_keys_for(state))
