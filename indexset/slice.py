"""An ordered, read-only view of the values held by an index set."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .ranges import Bounds, simplify_range, try_simplify_range

T = TypeVar("T")
K = TypeVar("K")


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a binary search.

    ``found`` tells whether the value is present; ``index`` is where it is,
    or where it could be inserted to keep the order.
    """

    found: bool
    index: int


def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@total_ordering
class SetSlice(Generic[T]):
    """A sequence of set values supporting indexed access but no hashed lookups.

    Unlike a set, a slice takes the order of its values into account for
    equality, ordering and hashing.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: tuple[T, ...] = tuple(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._values)

    def __getitem__(self, key):
        if isinstance(key, slice):
            span = simplify_range(key, len(self._values))
            return SetSlice(self._values[span.start:span.stop])
        index = operator.index(key)
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"index out of bounds: the len is {len(self._values)} "
                f"but the index is {index}"
            )
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SetSlice):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return self._values == tuple(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SetSlice):
            return NotImplemented
        return self._values < other._values

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SetSlice):
            return NotImplemented
        return self._values <= other._values

    def __hash__(self) -> int:
        return hash((len(self._values), self._values))

    def __repr__(self) -> str:
        return f"SetSlice({list(self._values)!r})"

    def get_index(self, index: int) -> Optional[T]:
        """Return the value at *index*, or ``None`` when out of bounds."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, bounds: Bounds) -> Optional["SetSlice[T]"]:
        """Return the sub-slice for *bounds*, or ``None`` if they do not fit."""
        span = try_simplify_range(bounds, len(self._values))
        if span is None:
            return None
        return SetSlice(self._values[span.start:span.stop])

    def first(self) -> Optional[T]:
        """Return the first value, or ``None`` if empty."""
        return self._values[0] if self._values else None

    def last(self) -> Optional[T]:
        """Return the last value, or ``None`` if empty."""
        return self._values[-1] if self._values else None

    def split_at(self, index: int) -> tuple["SetSlice[T]", "SetSlice[T]"]:
        """Divide the slice in two at *index*; raises if ``index > len``."""
        if not 0 <= index <= len(self._values):
            raise IndexError(
                f"split index {index} out of range for slice of length "
                f"{len(self._values)}"
            )
        return SetSlice(self._values[:index]), SetSlice(self._values[index:])

    def split_first(self) -> Optional[tuple[T, "SetSlice[T]"]]:
        """Return the first value and the rest, or ``None`` if empty."""
        if not self._values:
            return None
        first, *rest = self._values
        return first, SetSlice(rest)

    def split_last(self) -> Optional[tuple[T, "SetSlice[T]"]]:
        """Return the last value and the rest, or ``None`` if empty."""
        if not self._values:
            return None
        *rest, last = self._values
        return last, SetSlice(rest)

    def binary_search(self, value: T) -> SearchResult:
        """Search a sorted slice for *value*."""
        return self.binary_search_by(lambda item: _compare(item, value))

    def binary_search_by(self, compare: Callable[[T], int]) -> SearchResult:
        """Search a sorted slice with *compare*.

        *compare* gets a value and returns a negative number if it sorts
        before the target, zero if it is the target, and a positive number
        if it sorts after it.
        """
        size = len(self._values)
        if size == 0:
            return SearchResult(False, 0)
        base = 0
        while size > 1:
            half = size // 2
            mid = base + half
            if compare(self._values[mid]) <= 0:
                base = mid
            size -= half
        outcome = compare(self._values[base])
        if outcome == 0:
            return SearchResult(True, base)
        return SearchResult(False, base + (1 if outcome < 0 else 0))

    def binary_search_by_key(self, key: K, extract: Callable[[T], K]) -> SearchResult:
        """Search a slice sorted by *extract* for an item whose key is *key*."""
        return self.binary_search_by(lambda item: _compare(extract(item), key))

    def partition_point(self, predicate: Callable[[T], bool]) -> int:
        """Return the index of the first value for which *predicate* is false,
        assuming the slice is partitioned by it."""
        result = self.binary_search_by(lambda item: -1 if predicate(item) else 1)
        return result.index