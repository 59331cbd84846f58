import pytest

from algosuite.arrays_hash import first_missing_positive, two_sum


def test_two_sum_classic_example():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]


@pytest.mark.parametrize(
    "nums, target",
    [
        ([3, 2, 4], 6),
        ([3, 3], 6),
        ([-1, -2, -3, -4, -5], -8),
        ([0, 4, 3, 0], 0),
        ([1, 5, 9, 14, 20], 34),
    ],
)
def test_two_sum_indices_hit_target(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_solution_raises():
    with pytest.raises(ValueError):
        two_sum([1, 2, 3], 100)


def test_two_sum_empty_raises():
    with pytest.raises(ValueError):
        two_sum([], 0)


@pytest.mark.parametrize(
    "nums",
    [
        [1, 2, 0],
        [3, 4, -1, 1],
        [7, 8, 9, 11, 12],
        [1, 1, 1],
        [2, 3, 4],
        [5, 4, 3, 2, 1],
        [-5, -1, 0],
    ],
)
def test_first_missing_positive_invariants(nums):
    result = first_missing_positive(nums)
    assert result >= 1
    assert result not in nums
    assert all(k in nums for k in range(1, result))


def test_first_missing_positive_empty():
    assert first_missing_positive([]) == 1


def test_first_missing_positive_full_run():
    nums = [4, 2, 1, 3]
    assert first_missing_positive(nums) == len(nums) + 1


def test_first_missing_positive_does_not_mutate_input():
    nums = [3, 4, -1, 1]
    snapshot = list(nums)
    first_missing_positive(nums)
    assert nums == snapshot