"""Lazy, double-ended iterators over index set values and set operations."""

from __future__ import annotations

from typing import Any, Container, Generic, Iterable, Iterator, TypeVar

from .slice import SetSlice

T = TypeVar("T")


class ValuesIter(Generic[T]):
    """Iterate values in order, from either end.

    ``len()`` reports how many values remain, and :meth:`as_slice` shows them.
    """

    __slots__ = ("_values", "_front", "_back")

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._values: tuple[T, ...] = tuple(values)
        self._front = 0
        self._back = len(self._values)

    def __iter__(self) -> "ValuesIter[T]":
        return self

    def __next__(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        value = self._values[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return self._back - self._front

    def next_back(self) -> T:
        """Take the last remaining value; raise StopIteration when none is left."""
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._values[self._back]

    def as_slice(self) -> SetSlice[T]:
        """Return the values not yet produced."""
        return SetSlice(self._values[self._front:self._back])

    def __repr__(self) -> str:
        return f"ValuesIter({list(self._values[self._front:self._back])!r})"


class _Filtered(Generic[T]):
    """Values of one sequence filtered by membership in another container."""

    _keep_members: bool = True

    def __init__(self, values: Iterable[T], other: Container[Any]) -> None:
        self._iter = ValuesIter(values)
        self._other = other

    def _forward(self) -> T:
        for value in self._iter:
            if (value in self._other) == self._keep_members:
                return value
        raise StopIteration

    def _backward(self) -> T:
        while True:
            value = self._iter.next_back()
            if (value in self._other) == self._keep_members:
                return value

    def __repr__(self) -> str:
        remaining = [
            value
            for value in self._iter.as_slice()
            if (value in self._other) == self._keep_members
        ]
        return f"{type(self).__name__}({remaining!r})"


class Difference(_Filtered[T]):
    """Values of *values* that are not in *other*, in the order of *values*."""

    _keep_members = False

    def __init__(self, values: Iterable[T], other: Container[Any]) -> None:
        super().__init__(values, other)

    def __iter__(self) -> "Difference[T]":
        return self

    def __next__(self) -> T:
        return self._forward()

    def next_back(self) -> T:
        """Take the last remaining value; raise StopIteration when none is left."""
        return self._backward()


class Intersection(_Filtered[T]):
    """Values of *values* that are also in *other*, in the order of *values*."""

    _keep_members = True

    def __init__(self, values: Iterable[T], other: Container[Any]) -> None:
        super().__init__(values, other)

    def __iter__(self) -> "Intersection[T]":
        return self

    def __next__(self) -> T:
        return self._forward()

    def next_back(self) -> T:
        """Take the last remaining value; raise StopIteration when none is left."""
        return self._backward()


class _Chain(Generic[T]):
    """Two double-ended iterators joined end to end."""

    def __init__(self, head: Any, tail: Any) -> None:
        self._head = head
        self._tail = tail

    def forward(self) -> T:
        try:
            return next(self._head)
        except StopIteration:
            return next(self._tail)

    def backward(self) -> T:
        try:
            return self._tail.next_back()
        except StopIteration:
            return self._head.next_back()


class SymmetricDifference(Generic[T]):
    """Values in exactly one of two sets: those of *first* in its order,
    then those of *second* in its order."""

    def __init__(self, first: Iterable[T], second: Iterable[T]) -> None:
        first_values = tuple(first)
        second_values = tuple(second)
        self._chain: _Chain[T] = _Chain(
            Difference(first_values, _membership(second_values)),
            Difference(second_values, _membership(first_values)),
        )

    def __iter__(self) -> "SymmetricDifference[T]":
        return self

    def __next__(self) -> T:
        return self._chain.forward()

    def next_back(self) -> T:
        """Take the last remaining value; raise StopIteration when none is left."""
        return self._chain.backward()


class Union(Generic[T]):
    """All values of *first* in its order, then those of *second* not in *first*."""

    def __init__(self, first: Iterable[T], second: Iterable[T]) -> None:
        first_values = tuple(first)
        self._chain: _Chain[T] = _Chain(
            ValuesIter(first_values),
            Difference(second, _membership(first_values)),
        )

    def __iter__(self) -> "Union[T]":
        return self

    def __next__(self) -> T:
        return self._chain.forward()

    def next_back(self) -> T:
        """Take the last remaining value; raise StopIteration when none is left."""
        return self._chain.backward()


def _membership(values: tuple) -> Container[Any]:
    """Return a container answering ``in`` for *values*, hashed when possible."""
    try:
        return frozenset(values)
    except TypeError:
        return values


__all__ = [
    "ValuesIter",
    "Difference",
    "Intersection",
    "SymmetricDifference",
    "Union",
]


def _drain_back(iterator: Any) -> Iterator[Any]:
    """Yield every value of a double-ended iterator from the back."""
    while True:
        try:
            yield iterator.next_back()
        except StopIteration:
            return