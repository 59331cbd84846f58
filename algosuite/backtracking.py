"""Backtracking and recursive generation problems."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string a phone keypad can spell for ``digits``.

    Only the digits ``2`` to ``9`` carry letters; any other character raises
    ``ValueError``.
    """
    if not digits:
        return []
    try:
        groups = [_KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"digit {exc.args[0]!r} has no letters") from None
    return ["".join(letters) for letters in product(*groups)]


def generate_parentheses(n: int) -> list[str]:
    """Return all well-formed strings of ``n`` pairs of parentheses."""

    def build(prefix: str, opens: int, closes: int) -> Iterator[str]:
        if len(prefix) == 2 * n:
            yield prefix
            return
        if opens < n:
            yield from build(prefix + "(", opens + 1, closes)
        if closes < opens:
            yield from build(prefix + ")", opens, closes + 1)

    return list(build("", 0, 0))