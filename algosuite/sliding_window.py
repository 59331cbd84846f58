"""Sliding window problems over strings."""

from __future__ import annotations

from collections import Counter


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Characters count with multiplicity; the leftmost window wins on ties.
    Returns an empty string when there is no such window or ``t`` is empty.
    """
    if not t:
        return ""

    needed = Counter(t)
    missing = len(needed)
    best_start = 0
    best_len: int | None = None
    left = 0

    for right, char in enumerate(s):
        needed[char] -= 1
        if needed[char] == 0:
            missing -= 1

        while missing == 0:
            width = right - left + 1
            if best_len is None or width < best_len:
                best_start, best_len = left, width
            dropped = s[left]
            needed[dropped] += 1
            if needed[dropped] == 1:
                missing += 1
            left += 1

    if best_len is None:
        return ""
    return s[best_start:best_start + best_len]