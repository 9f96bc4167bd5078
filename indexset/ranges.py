"""Turn index bounds into concrete, validated index ranges."""

from __future__ import annotations

import operator
from typing import Optional, Union

Bounds = Union[None, slice, range]


def _split_bounds(bounds: Bounds) -> tuple[Optional[int], Optional[int]]:
    """Return ``(start, end)`` of *bounds*, with ``None`` for an open side.

    The start is inclusive and the end exclusive.
    """
    if bounds is None:
        return None, None
    if isinstance(bounds, range):
        if bounds.step != 1:
            raise ValueError(f"range step must be 1, not {bounds.step}")
        return bounds.start, bounds.stop
    if isinstance(bounds, slice):
        if bounds.step not in (None, 1):
            raise ValueError(f"slice step must be 1, not {bounds.step!r}")
        start = None if bounds.start is None else operator.index(bounds.start)
        end = None if bounds.stop is None else operator.index(bounds.stop)
        return start, end
    raise TypeError(
        f"bounds must be a slice, a range or None, not {type(bounds).__name__}"
    )


def simplify_range(bounds: Bounds, length: int) -> range:
    """Resolve *bounds* against a sequence of *length* items.

    Raises :class:`IndexError` when either end lies outside ``0..=length``
    or when the start comes after the end.
    """
    start, end = _split_bounds(bounds)
    if start is None:
        start = 0
    elif not 0 <= start <= length:
        raise IndexError(
            f"range start index {start} out of range for slice of length {length}"
        )
    if end is None:
        end = length
    elif not 0 <= end <= length:
        raise IndexError(
            f"range end index {end} out of range for slice of length {length}"
        )
    if start > end:
        raise IndexError(
            f"range start index {start} should be <= range end index {end}"
        )
    return range(start, end)


def try_simplify_range(bounds: Bounds, length: int) -> Optional[range]:
    """Like :func:`simplify_range`, but return ``None`` instead of raising
    for bounds that do not fit."""
    start, end = _split_bounds(bounds)
    if start is None:
        start = 0
    elif not 0 <= start <= length:
        return None
    if end is None:
        end = length
    elif not 0 <= end <= length:
        return None
    if start > end:
        return None
    return range(start, end)