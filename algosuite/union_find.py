"""Disjoint sets and the problems they solve."""

from __future__ import annotations

from collections.abc import Sequence


class UnionFind:
    """Disjoint sets over ``0 .. n-1`` with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._components = n

    @property
    def components(self) -> int:
        """Number of disjoint sets."""
        return self._components

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if they were already one."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self._size[rx] > self._size[ry]:
            rx, ry = ry, rx
        self._parent[rx] = ry
        self._size[ry] += self._size[rx]
        self._components -= 1
        return True


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups described by an adjacency matrix."""
    sets = UnionFind(len(is_connected))
    for i, row in enumerate(is_connected):
        for j, linked in enumerate(row[i + 1:], start=i + 1):
            if linked:
                sets.union(i, j)
    return sets.components


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge, of 1-based node labels, that closes a cycle.

    Raises ``ValueError`` when no edge does.
    """
    if not edges:
        raise ValueError("no redundant connection")
    sets = UnionFind(max(max(edge) for edge in edges))
    for edge in edges:
        u, v = edge
        if not sets.union(u - 1, v - 1):
            return list(edge)
    raise ValueError("no redundant connection")