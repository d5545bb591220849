"""Multi-column sorting utility.

Provides a stable multi-key sorting mechanism for tabular view models.
`MultiColumnSorter` accepts a list of row objects and sorts them by a
priority list of `SortKey` entries. Sorting is stable and applies keys from
lowest precedence to highest (one `list.sort` pass per key), which gives the
same order as a chained comparator without building composite tuples whose
directions would have to be mixed.

`compare_rows` evaluates the same key chain pairwise and is useful when a
caller needs the comparator itself (e.g. `functools.cmp_to_key`).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Sequence, TypeVar

__all__ = ["SortKey", "MultiColumnSorter", "compare_rows"]

T = TypeVar("T")
KeyFunc = Callable[[T], Any]


@dataclass(frozen=True)
class SortKey:
    key_func: KeyFunc
    ascending: bool = True
    name: str = ""  # diagnostic label only


def compare_rows(a: T, b: T, keys: Sequence[SortKey]) -> int:
    """Compare two rows by `keys` in priority order; returns -1, 0 or 1."""
    for sk in keys:
        va, vb = sk.key_func(a), sk.key_func(b)
        if va == vb:
            continue
        cmp = -1 if va < vb else 1
        return cmp if sk.ascending else -cmp
    return 0


class MultiColumnSorter(Generic[T]):
    """Utility to apply multi-key sorting in a stable manner.

    Usage:
        sorter = MultiColumnSorter(rows)
        rows_sorted = sorter.sort([
            SortKey(lambda r: r.total, ascending=False),
            SortKey(lambda r: r.location, ascending=True),
        ])
    """

    def __init__(self, rows: Iterable[T]):
        self._rows: List[T] = list(rows)

    def sort(self, keys: Sequence[SortKey]) -> List[T]:
        # Apply from lowest precedence to highest for stability
        result = list(self._rows)
        for sk in reversed(keys):
            result.sort(key=sk.key_func, reverse=not sk.ascending)
        return result
