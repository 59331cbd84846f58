"""Greedy problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last one.

    Each value is the longest jump allowed from that index.
    """
    jumps = 0
    current_end = 0
    max_reach = 0
    last = len(nums) - 1
    for index, step in enumerate(nums):
        max_reach = max(max_reach, index + step)
        if index == current_end and index != last:
            jumps += 1
            current_end = max_reach
    return jumps


def max_subarray(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``nums``.

    Raises ``ValueError`` for an empty input.
    """
    best: int | None = None
    running = 0
    for value in nums:
        running = max(running + value, value)
        best = running if best is None else max(best, running)
    if best is None:
        raise ValueError("max_subarray() of an empty sequence")
    return best