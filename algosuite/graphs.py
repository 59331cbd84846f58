"""Word ladder searches."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

_Pattern = tuple[str, str]


def _patterns(word: str) -> Iterator[_Pattern]:
    """Yield the word with each position blanked out in turn."""
    for i in range(len(word)):
        yield word[:i], word[i + 1:]


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Return the number of words in the shortest ladder from ``begin_word`` to ``end_word``.

    Each step changes one letter and must land on a word of ``word_list``.
    Returns 0 when no ladder exists.
    """
    buckets: defaultdict[_Pattern, list[str]] = defaultdict(list)
    for word in word_list:
        for key in _patterns(word):
            buckets[key].append(word)

    seen = {begin_word}
    frontier = [begin_word]
    depth = 1
    while frontier:
        next_frontier: list[str] = []
        for word in frontier:
            for key in _patterns(word):
                for neighbour in buckets.get(key, ()):
                    if neighbour == end_word:
                        return depth + 1
                    if neighbour not in seen:
                        seen.add(neighbour)
                        next_frontier.append(neighbour)
        frontier = next_frontier
        depth += 1
    return 0


def find_ladders(
    begin_word: str, end_word: str, word_list: Iterable[str]
) -> list[list[str]]:
    """Return every shortest ladder from ``begin_word`` to ``end_word``.

    Returns an empty list when ``end_word`` is not in ``word_list`` or cannot be reached.
    """
    words = list(word_list)
    buckets: defaultdict[_Pattern, dict[str, None]] = defaultdict(dict)
    for word in [begin_word, *words]:
        for key in _patterns(word):
            buckets[key][word] = None
    if end_word not in words:
        return []

    dist = {begin_word: 0}
    parents: defaultdict[str, list[str]] = defaultdict(list)
    frontier = [begin_word]
    found = False
    while frontier and not found:
        next_frontier: list[str] = []
        for word in frontier:
            if word == end_word:
                found = True
            step = dist[word] + 1
            for key in _patterns(word):
                for neighbour in buckets.get(key, {}):
                    if neighbour == word:
                        continue
                    if neighbour not in dist:
                        dist[neighbour] = step
                        next_frontier.append(neighbour)
                    if dist[neighbour] == step:
                        parents[neighbour].append(word)
        frontier = next_frontier

    if not found:
        return []

    ladders: list[list[str]] = []

    def walk_back(path: list[str]) -> None:
        if path[-1] == begin_word:
            ladders.append(path[::-1])
            return
        for parent in parents[path[-1]]:
            path.append(parent)
            walk_back(path)
            path.pop()

    walk_back([end_word])
    return ladders