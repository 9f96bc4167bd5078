"""A hash set that remembers and exposes the order of its values."""

from __future__ import annotations

from collections.abc import Set as AbstractSet
from typing import Any, Iterable, Optional, TypeVar

from .iterators import Difference, Intersection, SymmetricDifference, Union, ValuesIter
from .ranges import Bounds, simplify_range
from .sequence import OrderedValues

T = TypeVar("T")


class IndexSet(OrderedValues[T]):
    """A set whose iteration order is the order of insertion and removal.

    Values sit at compact indices ``0..len``: they can be looked up by
    value in constant time and by index in constant time. Re-inserting a
    value that is already present leaves it, and its position, unchanged.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        super().__init__()
        self.extend(iterable)

    # -- protocol ---------------------------------------------------------

    def __contains__(self, value: object) -> bool:
        return value in self._positions

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (IndexSet, AbstractSet)):
            return len(self) == len(other) and all(value in other for value in self)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def copy(self) -> "IndexSet[T]":
        """Return a shallow copy with the same order and capacity."""
        new = self._from_unique(self._values)
        new._capacity = self._capacity
        return new

    def iter(self) -> ValuesIter[T]:
        """Return a double-ended iterator over the values in order."""
        return ValuesIter(self._values)

    # -- insertion --------------------------------------------------------

    def insert(self, value: T) -> bool:
        """Add *value* at the end; return False if it was already present."""
        return self._insert_full(value)[1]

    def insert_full(self, value: T) -> tuple[int, bool]:
        """Add *value* at the end; return its index and whether it was added."""
        return self._insert_full(value)

    def insert_sorted(self, value: T) -> tuple[int, bool]:
        """Insert *value* at its sorted position among sorted values.

        If found by the search, return its index and False without change.
        Otherwise it is inserted (or moved) to the searched position.
        """
        result = self.binary_search(value)
        if result.found:
            return result.index, False
        return self.insert_before(result.index, value)

    def insert_before(self, index: int, value: T) -> tuple[int, bool]:
        """Insert *value* before the value at *index*, or at the end.

        An existing value is moved; its new index is *index* or one less.
        Raises IndexError unless ``0 <= index <= len``.
        """
        length = len(self._values)
        if not 0 <= index <= length:
            raise IndexError(
                f"index out of bounds: Valid range is 0..={length}, but got {index}"
            )
        existing = self._positions.get(value)
        if existing is not None:
            target = index - 1 if existing < index else index
            self.move_index(existing, target)
            return target, False
        self._place_new(index, value)
        return index, True

    def shift_insert(self, index: int, value: T) -> bool:
        """Insert *value* at *index*, shifting the others.

        An existing value is moved to *index*, which must then be below
        ``len``; a new value may go at ``0..=len``. Raises IndexError
        otherwise. Returns True if the value was new.
        """
        length = len(self._values)
        existing = self._positions.get(value)
        if existing is not None:
            if not 0 <= index < length:
                raise IndexError(
                    f"index out of bounds: Valid range is 0..{length}, but got {index}"
                )
            self.move_index(existing, index)
            return False
        if not 0 <= index <= length:
            raise IndexError(
                f"index out of bounds: Valid range is 0..={length}, but got {index}"
            )
        self._place_new(index, value)
        return True

    def _place_new(self, index: int, value: T) -> None:
        position, _ = self._insert_full(value)
        if position != index:
            self.move_index(position, index)

    def replace(self, value: T) -> Optional[T]:
        """Add *value*, replacing an equal stored value in place; return the old one."""
        return self.replace_full(value)[1]

    def replace_full(self, value: T) -> tuple[int, Optional[T]]:
        """Like :meth:`replace`, also returning the index of the value."""
        existing = self._positions.get(value)
        if existing is None:
            index, _ = self._insert_full(value)
            return index, None
        old = self._values[existing]
        self._values[existing] = value
        del self._positions[old]
        self._positions[value] = existing
        return existing, old

    def extend(self, iterable: Iterable[T]) -> None:
        """Insert every value of *iterable* in order."""
        for value in iterable:
            self._insert_full(value)

    def append(self, other: "IndexSet[T]") -> None:
        """Move all values of *other* into this set, leaving *other* empty."""
        self.extend(other)
        other.clear()

    def splice(self, bounds: Bounds, replace_with: Iterable[T]) -> list[T]:
        """Replace the values in *bounds* with those of *replace_with*.

        New values that already exist outside the range are left where
        they are; the rest fill the range in order. Returns the removed
        values. Raises IndexError if the bounds do not fit.
        """
        span = simplify_range(bounds, len(self._values))
        head = self._values[: span.start]
        removed = self._values[span.start : span.stop]
        tail = self._values[span.stop :]
        for value in removed:
            del self._positions[value]
        middle: list[T] = []
        for value in replace_with:
            if value in self._positions:
                continue
            self._positions[value] = -1
            middle.append(value)
        self._values = head + middle + tail
        self._reindex(span.start)
        self._capacity = max(self._capacity, len(self._values))
        return removed

    # -- lookup -----------------------------------------------------------

    def contains(self, value: Any) -> bool:
        """Return True if an equal value is in the set."""
        return value in self._positions

    def get(self, value: Any) -> Optional[T]:
        """Return the stored value equal to *value*, or None."""
        index = self._positions.get(value)
        return None if index is None else self._values[index]

    def get_full(self, value: Any) -> Optional[tuple[int, T]]:
        """Return the index and stored value equal to *value*, or None."""
        index = self._positions.get(value)
        return None if index is None else (index, self._values[index])

    def get_index_of(self, value: Any) -> Optional[int]:
        """Return the index of *value*, or None."""
        return self._positions.get(value)

    # -- removal by value -------------------------------------------------

    def swap_remove(self, value: Any) -> bool:
        """Remove *value* by swapping in the last value; return whether it was present."""
        return self.swap_remove_full(value) is not None

    def shift_remove(self, value: Any) -> bool:
        """Remove *value* by shifting later values down; return whether it was present."""
        return self.shift_remove_full(value) is not None

    def swap_take(self, value: Any) -> Optional[T]:
        """Remove and return the stored value equal to *value* (swap), or None."""
        found = self.swap_remove_full(value)
        return None if found is None else found[1]

    def shift_take(self, value: Any) -> Optional[T]:
        """Remove and return the stored value equal to *value* (shift), or None."""
        found = self.shift_remove_full(value)
        return None if found is None else found[1]

    def swap_remove_full(self, value: Any) -> Optional[tuple[int, T]]:
        """Remove *value* by swapping; return its former index and the stored value."""
        index = self._positions.get(value)
        if index is None:
            return None
        return index, self.swap_remove_index(index)

    def shift_remove_full(self, value: Any) -> Optional[tuple[int, T]]:
        """Remove *value* by shifting; return its former index and the stored value."""
        index = self._positions.get(value)
        if index is None:
            return None
        return index, self.shift_remove_index(index)

    # -- set operations ---------------------------------------------------

    def difference(self, other: "IndexSet[T]") -> Difference[T]:
        """Iterate values in this set but not in *other*, in this set's order."""
        return Difference(self._values, other)

    def symmetric_difference(self, other: "IndexSet[T]") -> SymmetricDifference[T]:
        """Iterate values in exactly one set: this set's first, then *other*'s."""
        return SymmetricDifference(self._values, other)

    def intersection(self, other: "IndexSet[T]") -> Intersection[T]:
        """Iterate values in both sets, in this set's order."""
        return Intersection(self._values, other)

    def union(self, other: "IndexSet[T]") -> Union[T]:
        """Iterate this set's values, then those of *other* not in this set."""
        return Union(self._values, other)

    def is_disjoint(self, other: "IndexSet[T]") -> bool:
        """Return True if the two sets share no value."""
        if len(self) <= len(other):
            return not any(value in other for value in self)
        return not any(value in self for value in other)

    def is_subset(self, other: "IndexSet[T]") -> bool:
        """Return True if every value of this set is in *other*."""
        return len(self) <= len(other) and all(value in other for value in self)

    def is_superset(self, other: "IndexSet[T]") -> bool:
        """Return True if every value of *other* is in this set."""
        return other.is_subset(self)

    def __and__(self, other: object) -> "IndexSet[T]":
        if not isinstance(other, IndexSet):
            return NotImplemented
        return IndexSet(self.intersection(other))

    def __or__(self, other: object) -> "IndexSet[T]":
        if not isinstance(other, IndexSet):
            return NotImplemented
        return IndexSet(self.union(other))

    def __xor__(self, other: object) -> "IndexSet[T]":
        if not isinstance(other, IndexSet):
            return NotImplemented
        return IndexSet(self.symmetric_difference(other))

    def __sub__(self, other: object) -> "IndexSet[T]":
        if not isinstance(other, IndexSet):
            return NotImplemented
        return IndexSet(self.difference(other))