"""Two-dimensional dynamic programming: pattern matching."""

from __future__ import annotations


def is_regex_match(s: str, p: str) -> bool:
    """Return whether ``p`` matches all of ``s``, with ``.`` and ``*`` as in regular expressions."""
    rows, cols = len(s) + 1, len(p) + 1
    dp = [[False] * cols for _ in range(rows)]
    dp[0][0] = True

    for j, pchar in enumerate(p, start=1):
        if pchar == "*" and j >= 2:
            dp[0][j] = dp[0][j - 2]

    for i, schar in enumerate(s, start=1):
        for j, pchar in enumerate(p, start=1):
            if pchar == "." or pchar == schar:
                dp[i][j] = dp[i - 1][j - 1]
            elif pchar == "*" and j >= 2:
                prev = p[j - 2]
                repeats = prev in (".", schar) and dp[i - 1][j]
                dp[i][j] = dp[i][j - 2] or repeats

    return dp[-1][-1]


def is_wildcard_match(s: str, p: str) -> bool:
    """Return whether ``p`` matches all of ``s``, where ``?`` is one character and ``*`` any run."""
    rows, cols = len(s) + 1, len(p) + 1
    dp = [[False] * cols for _ in range(rows)]
    dp[0][0] = True

    for j, pchar in enumerate(p, start=1):
        if pchar == "*":
            dp[0][j] = dp[0][j - 1]

    for i, schar in enumerate(s, start=1):
        for j, pchar in enumerate(p, start=1):
            if pchar == "?" or pchar == schar:
                dp[i][j] = dp[i - 1][j - 1]
            elif pchar == "*":
                dp[i][j] = dp[i][j - 1] or dp[i - 1][j]

    return dp[-1][-1]