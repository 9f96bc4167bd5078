"""Convert index sets to and from plain lists and JSON text, keeping their order."""

from __future__ import annotations

import json
import operator
from typing import Any, Iterable, Optional

from .indexset import IndexSet

MAX_PREALLOC_BYTES = 1024 * 1024

# Approximate bytes per stored value: the value reference plus its cached hash.
_ENTRY_SIZE = 16


def cautious_capacity(hint: Optional[int], item_size: int) -> int:
    """Limit a preallocation taken from an untrusted size *hint*.

    Returns the hint (zero when ``None``), but never more entries than fit
    in ``MAX_PREALLOC_BYTES`` at *item_size* bytes each.
    """
    item_size = operator.index(item_size)
    if item_size <= 0:
        raise ValueError(f"item_size must be positive, got {item_size}")
    requested = 0 if hint is None else operator.index(hint)
    if requested < 0:
        raise ValueError(f"hint must not be negative, got {requested}")
    return min(requested, MAX_PREALLOC_BYTES // item_size)


def set_to_list(values: Iterable[Any]) -> list[Any]:
    """Return the values of a set as a list, in their order."""
    return list(values)


def set_from_list(items: Iterable[Any]) -> IndexSet[Any]:
    """Build an :class:`IndexSet` from *items*, keeping the first of duplicates.

    Raises TypeError if an item cannot be hashed.
    """
    hint = operator.length_hint(items, 0)
    result: IndexSet[Any] = IndexSet()
    result.reserve(cautious_capacity(hint, _ENTRY_SIZE))
    for item in items:
        try:
            result.insert(item)
        except TypeError as error:
            raise TypeError(f"set item {item!r} is not hashable") from error
    return result


def dumps_set(values: Iterable[Any]) -> str:
    """Serialize a set as a JSON array of its values, in their order."""
    return json.dumps(set_to_list(values))


def loads_set(text: str) -> IndexSet[Any]:
    """Parse a JSON array into an :class:`IndexSet`.

    Raises ValueError if the text is not valid JSON or not an array, or
    if an element is not hashable.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"invalid type: {type(data).__name__}, expected a set")
    try:
        return set_from_list(data)
    except TypeError as error:
        raise ValueError(str(error)) from error