import statistics

import pytest

from algosuite.binary_search import find_median_sorted_arrays, search_rotated


@pytest.mark.parametrize(
    "a, b",
    [
        ([1, 3], [2]),
        ([1, 2], [3, 4]),
        ([], [1]),
        ([2], []),
        ([], [1, 2, 3, 4]),
        ([0, 0], [0, 0]),
        ([1, 5, 9], [2, 3, 4, 10, 11]),
        ([-10, -3, 7], [-5, 2]),
        ([100], [1, 2, 3, 4, 5, 6]),
        ([1, 2, 3, 4, 5, 6], [100]),
    ],
)
def test_median_matches_merged_median(a, b):
    assert find_median_sorted_arrays(a, b) == statistics.median(sorted(a + b))


def test_median_classic_example():
    assert find_median_sorted_arrays([1, 3], [2]) == 2.0


def test_median_is_symmetric():
    a, b = [1, 4, 8, 12], [2, 3, 9]
    assert find_median_sorted_arrays(a, b) == find_median_sorted_arrays(b, a)


def test_median_both_empty_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def _rotations(values):
    return [values[k:] + values[:k] for k in range(len(values))]


@pytest.mark.parametrize("nums", _rotations([0, 1, 2, 4, 5, 6, 7]))
def test_search_rotated_finds_every_element(nums):
    for value in nums:
        index = search_rotated(nums, value)
        assert nums[index] == value


@pytest.mark.parametrize("nums", _rotations([3, 8, 15, 21]))
def test_search_rotated_missing_value(nums):
    assert search_rotated(nums, 10) == -1
    assert search_rotated(nums, 100) == -1


def test_search_rotated_empty():
    assert search_rotated([], 5) == -1