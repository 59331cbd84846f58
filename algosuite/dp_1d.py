"""One-dimensional dynamic programming problems."""

from __future__ import annotations


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring, the leftmost one on ties."""
    if not s:
        return ""

    length = len(s)

    def expand(left: int, right: int) -> tuple[int, int]:
        while left >= 0 and right < length and s[left] == s[right]:
            left -= 1
            right += 1
        return left + 1, right - 1

    best_start, best_len = 0, 0
    for centre in range(length):
        for left, right in (expand(centre, centre), expand(centre, centre + 1)):
            span = right - left + 1
            if span > best_len:
                best_start, best_len = left, span
    return s[best_start:best_start + best_len]


def climb_stairs(n: int) -> int:
    """Return how many ways there are to climb ``n`` steps taking 1 or 2 at a time."""
    if n <= 2:
        return n
    prev2, prev1 = 1, 2
    for _ in range(3, n + 1):
        prev2, prev1 = prev1, prev1 + prev2
    return prev1