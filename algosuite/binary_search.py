"""Binary search problems."""

from __future__ import annotations

from collections.abc import Sequence

_NEG_INF = float("-inf")
_POS_INF = float("inf")


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences.

    Raises ``ValueError`` when both are empty or no valid partition exists.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    if not nums2:
        raise ValueError("both arrays are empty")

    size1, size2 = len(nums1), len(nums2)
    half = (size1 + size2) // 2
    is_even = (size1 + size2) % 2 == 0

    lo, hi = -1, size1 - 1
    while lo <= hi:
        cut1 = lo + (hi - lo) // 2
        left1 = nums1[cut1] if cut1 >= 0 else _NEG_INF
        right1 = nums1[cut1 + 1] if cut1 + 1 < size1 else _POS_INF

        cut2 = half - (cut1 + 1) - 1
        left2 = nums2[cut2] if cut2 >= 0 else _NEG_INF
        right2 = nums2[cut2 + 1] if cut2 + 1 < size2 else _POS_INF

        if left1 <= right2 and left2 <= right1:
            if is_even:
                return (max(left1, left2) + min(right1, right2)) / 2
            return float(min(right1, right2))
        if left1 > right2:
            hi = cut1 - 1
        else:
            lo = cut1 + 1

    raise ValueError("no valid median partition found")


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            if nums[mid] < target <= nums[right]:
                left = mid + 1
            else:
                right = mid - 1
    return -1