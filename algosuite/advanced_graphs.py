"""Breadth-first fills and Eulerian paths."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Iterable, MutableSequence, Sequence

EMPTY = 2**31 - 1
"""Marker for an empty room that has not yet been given a distance."""
GATE = 0
WALL = -1

_OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_START_AIRPORT = "JFK"


def walls_and_gates(rooms: MutableSequence[MutableSequence[int]]) -> None:
    """Fill each empty room with its distance to the nearest gate, in place.

    Gates hold ``GATE``, walls hold ``WALL`` and empty rooms hold ``EMPTY``.
    Rooms that no gate can reach keep the value ``EMPTY``.
    """
    if not rooms:
        return
    rows, cols = len(rooms), len(rooms[0])
    queue = deque(
        (r, c)
        for r, row in enumerate(rooms)
        for c, value in enumerate(row)
        if value == GATE
    )
    while queue:
        r, c = queue.popleft()
        for dr, dc in _OFFSETS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and rooms[nr][nc] == EMPTY:
                rooms[nr][nc] = rooms[r][c] + 1
                queue.append((nr, nc))


def find_itinerary(tickets: Iterable[Sequence[str]]) -> list[str]:
    """Return the lexically smallest route from ``JFK`` that uses every ticket once.

    Each ticket is an ``(origin, destination)`` pair. An Eulerian path starting
    at ``JFK`` is assumed to exist.
    """
    destinations: defaultdict[str, list[str]] = defaultdict(list)
    for origin, destination in tickets:
        destinations[origin].append(destination)
    for heap in destinations.values():
        heapq.heapify(heap)

    route: list[str] = []
    stack = [_START_AIRPORT]
    while stack:
        pending = destinations.get(stack[-1])
        if pending:
            stack.append(heapq.heappop(pending))
        else:
            route.append(stack.pop())
    route.reverse()
    return route