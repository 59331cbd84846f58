"""Arithmetic on digit strings and matrix geometry."""

from __future__ import annotations

from collections.abc import MutableSequence

_DIGITS = frozenset("0123456789")


def _check_digits(num: str) -> None:
    if not num or not _DIGITS.issuperset(num):
        raise ValueError(f"not a non-negative decimal number: {num!r}")


def multiply_strings(num1: str, num2: str) -> str:
    """Return the product of two non-negative decimal digit strings as a digit string.

    Raises ``ValueError`` if either argument is empty or holds a non-digit.
    """
    _check_digits(num1)
    _check_digits(num2)

    digits = [0] * (len(num1) + len(num2))
    for i, a in reversed(list(enumerate(num1))):
        for j, b in reversed(list(enumerate(num2))):
            total = int(a) * int(b) + digits[i + j + 1]
            carry, digits[i + j + 1] = divmod(total, 10)
            digits[i + j] += carry

    return "".join(map(str, digits)).lstrip("0") or "0"


def rotate_matrix(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place.

    Raises ``ValueError`` if the matrix is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")

    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()