import pytest

from algosuite.stacks import is_valid_parentheses, largest_rectangle_area


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[()]}", "a(b[c]d)e"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "{[}", "x]"])
def test_invalid_parentheses(s):
    assert not is_valid_parentheses(s)


def test_largest_rectangle_worked_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_empty():
    assert largest_rectangle_area([]) == 0


def test_largest_rectangle_single_bar():
    assert largest_rectangle_area([7]) == 7


def test_largest_rectangle_uniform_bars():
    heights = [3] * 4
    assert largest_rectangle_area(heights) == 3 * len(heights)


@pytest.mark.parametrize("heights", [[2, 4], [6, 2, 5, 4, 5, 1, 6], [1, 2, 3, 4, 5], [0, 0, 9]])
def test_largest_rectangle_at_least_tallest_bar(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area <= max(heights) * len(heights)


def test_largest_rectangle_symmetric_under_reversal():
    heights = [6, 2, 5, 4, 5, 1, 6]
    assert largest_rectangle_area(heights) == largest_rectangle_area(heights[::-1])