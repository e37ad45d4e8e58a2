import random

import pytest

from labworks.gapsort import LARGE_SIZE, MED_SIZE, SMALL_SIZE, gap_sort, main


def _values(seed, size):
    rng = random.Random(seed)
    return [rng.randint(0, 10_000) for _ in range(size)]


def test_empty_sequence_needs_no_comparisons():
    values = []
    assert gap_sort(values) == 0
    assert values == []


def test_single_value_unchanged():
    values = [7]
    assert gap_sort(values) == 0
    assert values == [7]


def test_pair_is_ordered():
    values = [2, 1]
    gap_sort(values)
    assert values == [1, 2]


@pytest.mark.parametrize("size", [SMALL_SIZE, MED_SIZE, LARGE_SIZE])
def test_contents_are_a_permutation(size):
    values = _values(size, size)
    original = list(values)
    gap_sort(values)
    assert sorted(values) == sorted(original)
    assert len(values) == size


@pytest.mark.parametrize("size", [2, SMALL_SIZE, MED_SIZE])
def test_comparisons_depend_only_on_length(size):
    first = gap_sort(_values(1, size))
    second = gap_sort(_values(2, size))
    third = gap_sort(sorted(_values(3, size)))
    assert first == second == third


def test_comparisons_grow_with_length():
    small = gap_sort(_values(1, SMALL_SIZE))
    medium = gap_sort(_values(1, MED_SIZE))
    large = gap_sort(_values(1, LARGE_SIZE))
    assert 0 < small < medium < large


def test_odd_length_steps_out_of_range():
    with pytest.raises(IndexError):
        gap_sort([3, 2, 1])


def test_main_reports_all_sizes(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Before Sorting:" in out
    assert "After Sorting:" in out
    assert f"Large: {LARGE_SIZE} elements" in out
    assert f"Med: {MED_SIZE} elements" in out
    assert f"Small: {SMALL_SIZE} elements" in out