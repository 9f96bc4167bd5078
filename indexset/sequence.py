"""The order-keeping half of an index set: positional access, reordering,
sorting and capacity bookkeeping for a sequence of unique values."""

from __future__ import annotations

import operator
import sys
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .ranges import Bounds, simplify_range, try_simplify_range
from .slice import SearchResult, SetSlice

T = TypeVar("T")
K = TypeVar("K")

_MIN_GROWTH = 4
_MAX_CAPACITY = sys.maxsize


def _check_amount(amount: int, what: str) -> int:
    amount = operator.index(amount)
    if amount < 0:
        raise ValueError(f"{what} must not be negative, got {amount}")
    return amount


class OrderedValues(Generic[T]):
    """Unique values kept in a compact order ``0..len``.

    Each value's position is tracked so that it can be found again
    without scanning. Hashed insertion and lookup are layered on top of
    this by subclasses.
    """

    def __init__(self) -> None:
        self._values: list[T] = []
        self._positions: dict[T, int] = {}
        self._capacity = 0

    # -- internal helpers -------------------------------------------------

    @classmethod
    def _from_unique(cls, values: Iterable[T]):
        """Build an instance of *cls* from values known to be unique."""
        new = cls.__new__(cls)
        OrderedValues.__init__(new)
        new._values = list(values)
        new._reindex()
        new._capacity = len(new._values)
        return new

    def _reindex(self, start: int = 0) -> None:
        """Refresh the recorded positions of every value from *start* on."""
        for position, value in enumerate(self._values[start:], start):
            self._positions[value] = position

    def _insert_full(self, value: T) -> tuple[int, bool]:
        """Append *value* unless present; return its index and whether it was added."""
        existing = self._positions.get(value)
        if existing is not None:
            return existing, False
        if len(self._values) >= self._capacity:
            self._capacity = max(_MIN_GROWTH, self._capacity * 2, len(self._values) + 1)
        self._values.append(value)
        index = len(self._values) - 1
        self._positions[value] = index
        return index, True

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"index out of bounds: the len is {len(self._values)} "
                f"but the index is {index}"
            )
        return index

    # -- sequence protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._values)

    def __getitem__(self, key: Any):
        if isinstance(key, slice):
            span = simplify_range(key, len(self._values))
            return SetSlice(self._values[span.start:span.stop])
        return self._values[self._check_index(key)]

    # -- capacity ---------------------------------------------------------

    def capacity(self) -> int:
        """Return how many values fit before the storage has to grow."""
        return self._capacity

    def try_reserve(self, additional: int) -> None:
        """Make room for *additional* more values; raise OverflowError if impossible."""
        needed = self._needed(additional)
        if needed > self._capacity:
            self._capacity = min(_MAX_CAPACITY, max(needed, self._capacity * 2))

    def try_reserve_exact(self, additional: int) -> None:
        """Make room for exactly *additional* more values; raise OverflowError if impossible."""
        needed = self._needed(additional)
        if needed > self._capacity:
            self._capacity = needed

    def reserve(self, additional: int) -> None:
        """Make room for *additional* more values."""
        self.try_reserve(additional)

    def reserve_exact(self, additional: int) -> None:
        """Make room for *additional* more values without over-allocating."""
        self.try_reserve_exact(additional)

    def _needed(self, additional: int) -> int:
        additional = _check_amount(additional, "additional")
        needed = len(self._values) + additional
        if needed > _MAX_CAPACITY:
            raise OverflowError("capacity overflow")
        return needed

    def shrink_to_fit(self) -> None:
        """Drop all spare capacity."""
        self._capacity = len(self._values)

    def shrink_to(self, min_capacity: int) -> None:
        """Shrink the capacity, but not below *min_capacity* or the length."""
        min_capacity = _check_amount(min_capacity, "min_capacity")
        self._capacity = min(self._capacity, max(len(self._values), min_capacity))

    # -- bulk removal -----------------------------------------------------

    def clear(self) -> None:
        """Remove every value, keeping the capacity."""
        self._values.clear()
        self._positions.clear()

    def truncate(self, length: int) -> None:
        """Keep only the first *length* values; no effect if already shorter."""
        length = _check_amount(length, "length")
        for value in self._values[length:]:
            del self._positions[value]
        del self._values[length:]

    def drain(self, bounds: Bounds = None) -> list[T]:
        """Remove and return the values in *bounds*; later values shift down.

        Raises IndexError if the bounds do not fit the sequence.
        """
        span = simplify_range(bounds, len(self._values))
        removed = self._values[span.start:span.stop]
        del self._values[span.start:span.stop]
        for value in removed:
            del self._positions[value]
        self._reindex(span.start)
        return removed

    def split_off(self, at: int):
        """Split off the values from *at* on into a new instance.

        Raises IndexError if ``at > len``.
        """
        at = operator.index(at)
        if not 0 <= at <= len(self._values):
            raise IndexError(
                f"index out of bounds: the len is {len(self._values)} "
                f"but the index is {at}"
            )
        tail = self._values[at:]
        self.truncate(at)
        return self._from_unique(tail)

    def pop(self) -> Optional[T]:
        """Remove and return the last value, or ``None`` if empty."""
        if not self._values:
            return None
        value = self._values.pop()
        del self._positions[value]
        return value

    # -- positional access ------------------------------------------------

    def first(self) -> Optional[T]:
        """Return the first value, or ``None`` if empty."""
        return self._values[0] if self._values else None

    def last(self) -> Optional[T]:
        """Return the last value, or ``None`` if empty."""
        return self._values[-1] if self._values else None

    def get_index(self, index: int) -> Optional[T]:
        """Return the value at *index*, or ``None`` when out of bounds."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, bounds: Bounds) -> Optional[SetSlice[T]]:
        """Return the values in *bounds* as a slice, or ``None`` if they do not fit."""
        span = try_simplify_range(bounds, len(self._values))
        if span is None:
            return None
        return SetSlice(self._values[span.start:span.stop])

    def as_slice(self) -> SetSlice[T]:
        """Return all values as a slice."""
        return SetSlice(self._values)

    def swap_remove_index(self, index: int) -> Optional[T]:
        """Remove the value at *index*, moving the last value into its place.

        Returns ``None`` when *index* is out of bounds.
        """
        if not 0 <= index < len(self._values):
            return None
        removed = self._values[index]
        last = self._values.pop()
        del self._positions[removed]
        if index < len(self._values):
            self._values[index] = last
            self._positions[last] = index
        return removed

    def shift_remove_index(self, index: int) -> Optional[T]:
        """Remove the value at *index*, shifting later values down.

        Returns ``None`` when *index* is out of bounds.
        """
        if not 0 <= index < len(self._values):
            return None
        removed = self._values.pop(index)
        del self._positions[removed]
        self._reindex(index)
        return removed

    def move_index(self, source: int, target: int) -> None:
        """Move the value at *source* to *target*, shifting those in between.

        Raises IndexError if either index is out of bounds.
        """
        source = self._check_index(source)
        target = self._check_index(target)
        if source == target:
            return
        value = self._values.pop(source)
        self._values.insert(target, value)
        self._reindex(min(source, target))

    def swap_indices(self, a: int, b: int) -> None:
        """Swap the values at *a* and *b*; raises IndexError if out of bounds."""
        a = self._check_index(a)
        b = self._check_index(b)
        values = self._values
        values[a], values[b] = values[b], values[a]
        self._positions[values[a]] = a
        self._positions[values[b]] = b

    # -- reordering -------------------------------------------------------

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._values.reverse()
        self._reindex()

    def retain(self, keep: Callable[[T], bool]) -> None:
        """Keep only the values for which *keep* is true, in their order."""
        kept = []
        for value in self._values:
            if keep(value):
                kept.append(value)
            else:
                del self._positions[value]
        self._values = kept
        self._reindex()

    def sort(self) -> None:
        """Sort the values by their natural ordering (stable)."""
        self._values.sort()
        self._reindex()

    def sort_by(self, compare: Callable[[T, T], int]) -> None:
        """Sort with *compare*, which returns a negative, zero or positive number (stable)."""
        self._values.sort(key=cmp_to_key(compare))
        self._reindex()

    def sort_unstable(self) -> None:
        """Sort the values by their natural ordering."""
        self.sort()

    def sort_unstable_by(self, compare: Callable[[T, T], int]) -> None:
        """Sort with the three-way comparison *compare*."""
        self.sort_by(compare)

    def sort_by_cached_key(self, key: Callable[[T], Any]) -> None:
        """Sort by *key*, calling it once per value (stable)."""
        self._values.sort(key=key)
        self._reindex()

    def sorted_by(self, compare: Callable[[T, T], int]) -> Iterator[T]:
        """Iterate the values sorted with *compare*, leaving this sequence unchanged."""
        return iter(sorted(self._values, key=cmp_to_key(compare)))

    def sorted_unstable_by(self, compare: Callable[[T, T], int]) -> Iterator[T]:
        """Iterate the values sorted with *compare*, leaving this sequence unchanged."""
        return self.sorted_by(compare)

    # -- searching --------------------------------------------------------

    def binary_search(self, value: T) -> SearchResult:
        """Search the sorted values for *value*."""
        return self.as_slice().binary_search(value)

    def binary_search_by(self, compare: Callable[[T], int]) -> SearchResult:
        """Search the sorted values with a three-way *compare* against the target."""
        return self.as_slice().binary_search_by(compare)

    def binary_search_by_key(self, key: K, extract: Callable[[T], K]) -> SearchResult:
        """Search values sorted by *extract* for one whose key equals *key*."""
        return self.as_slice().binary_search_by_key(key, extract)

    def partition_point(self, predicate: Callable[[T], bool]) -> int:
        """Return the index of the first value for which *predicate* is false."""
        return self.as_slice().partition_point(predicate)