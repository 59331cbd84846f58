"""Prefix trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_word: bool = False


def _add(root: _Node, word: str) -> None:
    node = root
    for char in word:
        node = node.children.setdefault(char, _Node())
    node.is_word = True


class Trie:
    """A set of words supporting exact lookup and prefix queries."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _add(self._root, word)

    def _find(self, prefix: str) -> Optional[_Node]:
        node = self._root
        for char in prefix:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_word

    def starts_with(self, prefix: str) -> bool:
        """Return whether any inserted word begins with ``prefix``."""
        return self._find(prefix) is not None


class WordDictionary:
    """A set of words searchable with ``.`` standing for any single character."""

    def __init__(self) -> None:
        self._root = _Node()

    def add_word(self, word: str) -> None:
        """Add ``word`` to the dictionary."""
        _add(self._root, word)

    def search(self, word: str) -> bool:
        """Return whether some added word matches the pattern ``word``."""

        def matches(node: _Node, rest: str) -> bool:
            if not rest:
                return node.is_word
            head, tail = rest[0], rest[1:]
            if head != ".":
                child = node.children.get(head)
                return child is not None and matches(child, tail)
            return any(matches(child, tail) for child in node.children.values())

        return matches(self._root, word)