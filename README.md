# indexset

`indexset` provides `IndexSet`, a set that remembers order. Values keep the
order they were inserted in, and each value has a position in the range
`0..len(set)`. A value can be found by hash or by its index, and both lookups
take constant time.

The package is pure Python and needs nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Basic use

```python
from indexset.indexset import IndexSet

letters = IndexSet("a short treatise on fungi")
assert "s" in letters
assert "y" not in letters

s = IndexSet([3, 1, 2])
s.insert(1)                  # False: already there, position unchanged
s.insert_full(7)             # (3, True)
s.get_index_of(2)            # 2
s[0]                         # 3
list(s)                      # [3, 1, 2, 7]
```

`get`, `get_full` and `get_index_of` return `None` for a value that is not
present. `contains(value)` does the same job as `value in s`. `replace` and
`replace_full` swap in a new object for an equal stored one and keep its
position. `extend` inserts values from any iterable. `append(other)` moves
every value of another `IndexSet` into this one and leaves `other` empty.
`copy()` returns a shallow copy.

`IndexSet` is mutable, so it cannot be hashed. Equality ignores order: an
`IndexSet` is equal to another `IndexSet`, or to a built-in `set` or
`frozenset`, that holds the same values.

### Positions and removal

Removal can either keep the order of the other values or be quick:

- `shift_remove(value)` shifts the values after it down one place, so their
  relative order is kept.
- `swap_remove(value)` puts the last value into the gap, which changes where
  that last value sits.

`swap_take`, `shift_take`, `swap_remove_full` and `shift_remove_full` work the
same way and also return what was removed, or `None` if the value was absent.
`swap_remove_index` and `shift_remove_index` remove by position and return
`None` for an index out of range. `pop()` removes the last value, or returns
`None` on an empty set.

`move_index(source, target)` and `swap_indices(a, b)` reorder by position and
raise `IndexError` for an index out of range. Indexing with `s[i]` also raises
`IndexError` when `i` is out of range. `get_index(i)` returns `None` in that
case, and so do `first()` and `last()` on an empty set.

`insert_before(index, value)` and `shift_insert(index, value)` put a value at
a position. If the value is already present, they move it there:

- `insert_before` accepts `0..=len`. It returns `(index, inserted)`. For a
  value that moves up, the index is one less than the one you passed.
- `shift_insert` returns whether the value was new. An existing value may only
  move to `0..len`. A new value may go anywhere in `0..=len`.

`insert_sorted(value)` searches the sorted contents and inserts the value at
the position it finds.

### Ordered set operations

`difference`, `intersection`, `symmetric_difference` and `union` return lazy
iterators. They follow the order of the first set, then the second. Each one
can also be consumed from the back with `next_back()`.

```python
a = IndexSet(range(0, 3))
b = IndexSet(range(3, 6))
list(b.union(a))             # [3, 4, 5, 0, 1, 2]
a | b == IndexSet(range(6))  # True; set equality ignores order
```

The operators `&`, `|`, `^` and `-` build new `IndexSet`s in the same order.
`is_disjoint`, `is_subset` and `is_superset` compare membership.

`s.iter()` returns a `ValuesIter`. It reports how many values remain through
`len()`, shows them through `as_slice()`, and also has `next_back()`. These
iterator classes live in `indexset.iterators`.

### Slices and searching

`as_slice()`, `get_range(bounds)` and indexing with a Python slice (`s[1:3]`)
return a `SetSlice` from `indexset.slice`. A `SetSlice` is a read-only, ordered
view. It is compared in order, is equal to a list or tuple with the same values
in the same order, can be hashed, and supports `split_at`, `split_first` and
`split_last`.

Bounds can be a `slice` with step 1, a `range` with step 1, or `None` for
everything. `get_range` returns `None` when the bounds do not fit.
`s[...]`, `drain` and `splice` raise `IndexError` instead. The helpers that
check bounds, `simplify_range` and `try_simplify_range`, are in
`indexset.ranges`.

On sorted contents, `binary_search`, `binary_search_by`, `binary_search_by_key`
and `partition_point` work on both sets and slices. The first three return a
`SearchResult(found, index)`: `index` is either where the value is or where it
could be inserted. `binary_search_by` takes a function of one value that
returns a negative number, zero or a positive number relative to the target.

```python
s = IndexSet([1, 2, 4, 6, 8, 9])
s.binary_search(6)                    # SearchResult(found=True, index=3)
s.binary_search(5)                    # SearchResult(found=False, index=3)
s.partition_point(lambda x: x < 7)    # 4
```

### Sorting and other changes

These methods change the set in place:

- `sort`, `sort_unstable`, and `sort_by_cached_key(key)`.
- `sort_by(compare)` and `sort_unstable_by(compare)`, which take a three-way
  comparison of two values.
- `reverse` and `retain(keep)`.
- `truncate(length)` and `clear`.

`sorted_by` and `sorted_unstable_by` return an iterator over the values in
sorted order and leave the set as it is.

Some methods remove values and return them:

- `drain(bounds)` removes the values in a range and returns them as a list.
- `split_off(at)` moves the values from `at` onward into a new `IndexSet`.
- `splice(bounds, replace_with)` replaces a range with new values. It skips
  values that already exist outside the range and returns the removed values
  as a list.

`capacity`, `reserve`, `reserve_exact`, `try_reserve`, `try_reserve_exact`,
`shrink_to_fit` and `shrink_to` keep a count of room reserved ahead of use.
`try_reserve` raises `OverflowError` for a request beyond `sys.maxsize`.
Storage itself is managed by Python, so this count allocates nothing.

### Serialization

```python
from indexset.indexset import IndexSet
from indexset.serialization import dumps_set, loads_set

text = dumps_set(IndexSet([1, 2, 3, 4]))   # "[1, 2, 3, 4]"
loads_set(text)                            # IndexSet([1, 2, 3, 4])
```

A set is written as a JSON array of its values in order. Reading it back
inserts each value in turn, so duplicates collapse to their first position.
`loads_set` raises `ValueError` in three cases: the text is not JSON, the text
is not an array, or an element cannot be hashed.

`set_to_list` and `set_from_list` do the same conversion without JSON.
`cautious_capacity(hint, item_size)` caps how much room is reserved ahead for
a size hint, at 1 MiB worth of entries.

## Limits

The package has only an ordered set. It has no ordered map with keys and
values, no parallel iteration, and no serialization format other than plain
lists and JSON.