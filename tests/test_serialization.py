import json

import pytest

from indexset.indexset import IndexSet
from indexset.serialization import (
    MAX_PREALLOC_BYTES,
    cautious_capacity,
    dumps_set,
    loads_set,
    set_from_list,
    set_to_list,
)


def test_serde_set_tokens():
    values = IndexSet([1, 2, 3, 4])
    assert set_to_list(values) == [1, 2, 3, 4]
    assert dumps_set(values) == "[1, 2, 3, 4]"
    assert loads_set(dumps_set(values)) == values
    assert list(loads_set(dumps_set(values))) == [1, 2, 3, 4]


def test_serde_set_extended():
    values = IndexSet()
    values.extend(range(1, 5))
    assert set_to_list(values) == [1, 2, 3, 4]
    restored = loads_set(dumps_set(values))
    assert list(restored) == [1, 2, 3, 4]


def test_order_preserved_not_sorted():
    values = IndexSet([5, -1, 3, 0])
    text = dumps_set(values)
    assert json.loads(text) == [5, -1, 3, 0]
    assert list(loads_set(text)) == [5, -1, 3, 0]


def test_duplicates_keep_first_position():
    restored = loads_set("[3, 1, 3, 2, 1]")
    assert list(restored) == [3, 1, 2]
    assert len(restored) == 3


def test_set_from_list_reserves_capacity():
    restored = set_from_list([1, 2, 3, 4])
    assert restored.capacity() >= 4
    assert list(restored) == [1, 2, 3, 4]


def test_set_from_list_generator():
    restored = set_from_list(x * 2 for x in range(3))
    assert list(restored) == [0, 2, 4]


def test_set_from_list_unhashable():
    with pytest.raises(TypeError):
        set_from_list([[1], [2]])


def test_loads_set_rejects_non_array():
    with pytest.raises(ValueError):
        loads_set('{"a": 1}')


def test_loads_set_rejects_unhashable_items():
    with pytest.raises(ValueError):
        loads_set("[[1, 2]]")


def test_loads_set_rejects_bad_json():
    with pytest.raises(ValueError):
        loads_set("[1, 2")


def test_empty_round_trip():
    assert dumps_set(IndexSet()) == "[]"
    assert len(loads_set("[]")) == 0


def test_cautious_capacity_none_hint():
    assert cautious_capacity(None, 16) == 0


def test_cautious_capacity_small_hint():
    assert cautious_capacity(10, 16) == 10


def test_cautious_capacity_caps_large_hint():
    assert cautious_capacity(10**12, 16) == MAX_PREALLOC_BYTES // 16
    assert cautious_capacity(10**12, 1) == 1024 * 1024


def test_cautious_capacity_invalid_size():
    with pytest.raises(ValueError):
        cautious_capacity(5, 0)


def test_cautious_capacity_negative_hint():
    with pytest.raises(ValueError):
        cautious_capacity(-1, 8)