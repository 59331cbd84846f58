"""Bit manipulation problems."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def reverse_bits(n: int) -> int:
    """Return the 32-bit unsigned integer with the bits of ``n`` in reverse order."""
    bits = format(n & _WORD_MASK, f"0{_WORD_BITS}b")
    return int(bits[::-1], 2)