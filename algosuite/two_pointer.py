"""Two-pointer problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the given vertical lines."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct sorted triple of values from ``nums`` summing to zero."""
    values = sorted(nums)
    size = len(values)
    triples: list[list[int]] = []

    for i, first in enumerate(values):
        if first > 0:
            break
        if i > 0 and first == values[i - 1]:
            continue
        left, right = i + 1, size - 1
        while left < right:
            total = first + values[left] + values[right]
            if total == 0:
                triples.append([first, values[left], values[right]])
            if total <= 0:
                left += 1
                while left < right and values[left] == values[left - 1]:
                    left += 1
            else:
                right -= 1
                while left < right and values[right] == values[right + 1]:
                    right -= 1
    return triples