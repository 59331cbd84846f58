"""Heap-based problems."""

from __future__ import annotations

import heapq


class MedianFinder:
    """Running median of a stream of numbers, kept in two heaps."""

    def __init__(self) -> None:
        self._lower: list[int] = []  # max-heap of the smaller half, stored negated
        self._upper: list[int] = []  # min-heap of the larger half

    def add_num(self, num: int) -> None:
        """Add ``num`` to the stream."""
        largest_low = -heapq.heappushpop(self._lower, -num)
        heapq.heappush(self._upper, largest_low)
        if len(self._upper) > len(self._lower) + 1:
            heapq.heappush(self._lower, -heapq.heappop(self._upper))

    def find_median(self) -> float:
        """Return the median of the numbers added so far.

        Raises ``ValueError`` if nothing has been added.
        """
        if not self._upper:
            raise ValueError("no numbers have been added")
        if (len(self._upper) + len(self._lower)) % 2 == 0:
            return (self._upper[0] - self._lower[0]) / 2
        return float(self._upper[0])