"""Stack and monotonic stack problems."""

from __future__ import annotations

from collections.abc import Sequence

_OPENERS = frozenset("([{")
_MATCHING = {")": "(", "]": "[", "}": "{"}


def is_valid_parentheses(s: str) -> bool:
    """Return whether the brackets in ``s`` are balanced and properly nested.

    Characters that are not brackets are ignored.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _MATCHING:
            if not stack or stack[-1] != _MATCHING[char]:
                return False
            stack.pop()
    return not stack


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under a histogram."""
    stack: list[int] = []
    best = 0
    # A trailing zero-height bar flushes whatever is left on the stack.
    for index, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] > height:
            bar = heights[stack.pop()]
            width = index - stack[-1] - 1 if stack else index
            best = max(best, bar * width)
        stack.append(index)
    return best