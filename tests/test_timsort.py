import random

import pytest

from contestkit.timsort import insertion_sort, merge, tim_sort

SAMPLE = [-2, 7, 15, -14, 0, 15, 0, 7, -7, -4, -13, 5, 8, -14, 12]


def test_sample_array():
    assert tim_sort(SAMPLE) == sorted(SAMPLE)


def test_input_is_not_modified():
    data = list(SAMPLE)
    tim_sort(data)
    assert data == SAMPLE


@pytest.mark.parametrize("run", [1, 2, 3, 5, 32])
def test_small_runs_force_merges(run):
    rng = random.Random(run)
    data = [rng.randint(-50, 50) for _ in range(137)]
    assert tim_sort(data, run) == sorted(data)


def test_empty():
    assert tim_sort([]) == []


def test_invalid_run():
    with pytest.raises(ValueError):
        tim_sort([1, 2], 0)


def test_insertion_sort_touches_only_range():
    data = [9, 5, 3, 8, 1, 0]
    insertion_sort(data, 1, 4)
    assert data[0] == 9 and data[5] == 0
    assert data[1:5] == sorted([5, 3, 8, 1])


def test_merge_two_sorted_halves():
    data = [100, 1, 4, 9, 2, 3, 10, -1]
    merge(data, 1, 3, 6)
    assert data[1:7] == sorted([1, 4, 9, 2, 3, 10])
    assert data[0] == 100 and data[7] == -1