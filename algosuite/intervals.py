"""Interval problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals, returned in sorted order."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, non-overlapping ``intervals``, merging as needed."""
    start, end = new_interval
    result: list[list[int]] = []
    phase = "before"
    for lo, hi in intervals:
        if phase == "before":
            if hi < start:
                result.append([lo, hi])
                continue
            phase = "merging"
        if phase == "merging":
            if lo <= end:
                start, end = min(start, lo), max(end, hi)
                continue
            result.append([start, end])
            phase = "after"
        result.append([lo, hi])
    if phase != "after":
        result.append([start, end])
    return result