import pytest

from indexset.ranges import simplify_range, try_simplify_range


def test_none_is_full_range():
    assert simplify_range(None, 7) == range(0, 7)
    assert try_simplify_range(None, 7) == range(0, 7)


def test_open_slice_is_full_range():
    assert simplify_range(slice(None, None), 5) == range(5)
    assert try_simplify_range(slice(None, None), 5) == range(5)


def test_open_start_and_end():
    assert simplify_range(slice(None, 3), 5) == range(0, 3)
    assert simplify_range(slice(2, None), 5) == range(2, 5)


@pytest.mark.parametrize("length", [0, 1, 4])
def test_every_valid_pair_is_kept(length):
    for start in range(length + 1):
        for end in range(start, length + 1):
            expected = range(start, end)
            assert simplify_range(slice(start, end), length) == expected
            assert try_simplify_range(slice(start, end), length) == expected


def test_range_objects_are_accepted():
    assert simplify_range(range(1, 3), 4) == range(1, 3)
    assert try_simplify_range(range(1, 3), 4) == range(1, 3)


def test_start_past_length_raises():
    with pytest.raises(IndexError, match="range start index"):
        simplify_range(slice(6, None), 5)
    assert try_simplify_range(slice(6, None), 5) is None


def test_end_past_length_raises():
    with pytest.raises(IndexError, match="range end index"):
        simplify_range(slice(0, 6), 5)
    assert try_simplify_range(slice(0, 6), 5) is None


def test_start_after_end_raises():
    with pytest.raises(IndexError, match="should be <="):
        simplify_range(slice(4, 2), 5)
    assert try_simplify_range(slice(4, 2), 5) is None


def test_negative_indices_are_out_of_range():
    with pytest.raises(IndexError):
        simplify_range(slice(-1, None), 5)
    with pytest.raises(IndexError):
        simplify_range(slice(None, -1), 5)
    assert try_simplify_range(slice(-1, None), 5) is None
    assert try_simplify_range(slice(None, -1), 5) is None


def test_step_other_than_one_is_rejected():
    with pytest.raises(ValueError):
        simplify_range(slice(0, 4, 2), 5)
    with pytest.raises(ValueError):
        try_simplify_range(range(0, 4, 2), 5)


def test_unsupported_bounds_type():
    with pytest.raises(TypeError):
        simplify_range((0, 2), 5)
    with pytest.raises(TypeError):
        try_simplify_range("0:2", 5)


def test_try_agrees_with_simplify():
    length = 4
    for start in [None, *range(-2, length + 3)]:
        for end in [None, *range(-2, length + 3)]:
            bounds = slice(start, end)
            result = try_simplify_range(bounds, length)
            if result is None:
                with pytest.raises(IndexError):
                    simplify_range(bounds, length)
            else:
                assert simplify_range(bounds, length) == result
                assert 0 <= result.start <= result.stop <= length