"""Array and hashing problems."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``[i, j]`` (``i < j``) of two numbers adding up to ``target``.

    Raises ``ValueError`` when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    raise ValueError("no two-sum solution exists")


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer that does not occur in ``nums``."""
    limit = len(nums)
    present = {value for value in nums if 0 < value <= limit}
    return next(k for k in range(1, limit + 2) if k not in present)