"""Thread ordering."""

from __future__ import annotations

import threading
from collections.abc import Callable


class OrderedPrinter:
    """Runs three callbacks in first, second, third order whatever thread calls them."""

    def __init__(self) -> None:
        self._first_done = threading.Event()
        self._second_done = threading.Event()

    def first(self, print_first: Callable[[], None]) -> None:
        """Run ``print_first`` at once."""
        print_first()
        self._first_done.set()

    def second(self, print_second: Callable[[], None]) -> None:
        """Run ``print_second`` once ``first`` has finished."""
        self._first_done.wait()
        print_second()
        self._second_done.set()

    def third(self, print_third: Callable[[], None]) -> None:
        """Run ``print_third`` once ``second`` has finished."""
        self._second_done.wait()
        print_third()