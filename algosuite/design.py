"""Data-structure design problems: an LRU cache and a cached social news feed."""

from __future__ import annotations

import heapq
from collections import OrderedDict, defaultdict, deque
from collections.abc import Iterable
from itertools import islice

_Tweet = tuple[int, int]  # (timestamp, tweet id)


class LRUCache:
    """Fixed-capacity key/value cache that evicts the least recently used entry."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._entries: OrderedDict[int, int] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: int) -> int:
        """Return the value stored for ``key`` and mark it used, or -1 if absent."""
        if key not in self._entries:
            return -1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: int, value: int) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry when over capacity."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        self._entries[key] = value
        if len(self._entries) > self._capacity:
            self._entries.popitem(last=False)


class Twitter:
    """A small social network with a two-layer news feed cache.

    The base layer holds the merged tweets of a user and their ordinary
    followees; the feed layer merges that with the tweets of followed
    celebrities. Users with many followers become celebrities so that their
    tweets invalidate only the cheaper feed layer of their followers.
    """

    FEED_SIZE = 10
    CELEB_PROMOTE = 1000
    CELEB_DEMOTE = 900

    def __init__(self) -> None:
        self._time = 0
        self._tweets: dict[int, deque[_Tweet]] = {}
        self._following: defaultdict[int, set[int]] = defaultdict(set)
        self._followers: defaultdict[int, set[int]] = defaultdict(set)
        self._celebs: set[int] = set()

        self._base_cache: dict[int, list[_Tweet]] = {}
        self._base_sources: defaultdict[int, set[int]] = defaultdict(set)
        self._base_valid: dict[int, bool] = {}

        self._feed_cache: dict[int, list[int]] = {}
        self._feed_valid: dict[int, bool] = {}

    def _merge(self, sources: Iterable[Iterable[_Tweet]]) -> list[_Tweet]:
        """Merge newest-first tweet streams into the newest ``FEED_SIZE`` tweets."""
        return list(islice(heapq.merge(*sources, reverse=True), self.FEED_SIZE))

    def _user_tweets(self, user_id: int) -> deque[_Tweet]:
        return self._tweets.get(user_id) or deque()

    def _build_base(self, user_id: int) -> None:
        contributors = [user_id] + [
            followee
            for followee in self._following[user_id]
            if followee not in self._celebs
        ]
        contributors = [uid for uid in contributors if self._user_tweets(uid)]
        self._base_cache[user_id] = self._merge(
            reversed(self._user_tweets(uid)) for uid in contributors
        )
        self._base_sources[user_id] = set(contributors)
        self._base_valid[user_id] = True

    def _build_feed(self, user_id: int) -> None:
        if not self._base_valid.get(user_id, False):
            self._build_base(user_id)
        sources: list[Iterable[_Tweet]] = [self._base_cache[user_id]]
        sources.extend(
            reversed(self._user_tweets(followee))
            for followee in self._following[user_id]
            if followee in self._celebs and self._user_tweets(followee)
        )
        self._feed_cache[user_id] = [tweet_id for _, tweet_id in self._merge(sources)]
        self._feed_valid[user_id] = True

    def _invalidate_base(self, user_id: int) -> None:
        self._base_valid[user_id] = False
        self._feed_valid[user_id] = False

    def _invalidate_feed(self, user_id: int) -> None:
        self._feed_valid[user_id] = False

    def _ensure_user(self, user_id: int) -> None:
        if user_id not in self._tweets:
            self._tweets[user_id] = deque(maxlen=self.FEED_SIZE)
            self._base_valid[user_id] = False
            self._feed_valid[user_id] = False

    def post_tweet(self, user_id: int, tweet_id: int) -> None:
        """Record a new tweet by ``user_id``."""
        self._ensure_user(user_id)
        self._tweets[user_id].append((self._time, tweet_id))
        self._time += 1

        self._invalidate_base(user_id)
        invalidate = (
            self._invalidate_feed if user_id in self._celebs else self._invalidate_base
        )
        for follower in self._followers[user_id]:
            invalidate(follower)

    def get_news_feed(self, user_id: int) -> list[int]:
        """Return up to ``FEED_SIZE`` tweet ids from the user and their followees, newest first."""
        self._ensure_user(user_id)
        if not self._feed_valid.get(user_id, False):
            self._build_feed(user_id)
        return list(self._feed_cache[user_id])

    def follow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` follow ``followee_id``; following oneself does nothing."""
        if follower_id == followee_id:
            return
        self._ensure_user(follower_id)
        self._ensure_user(followee_id)
        if followee_id in self._following[follower_id]:
            return

        self._following[follower_id].add(followee_id)
        self._followers[followee_id].add(follower_id)

        if len(self._followers[followee_id]) >= self.CELEB_PROMOTE:
            self._celebs.add(followee_id)

        if followee_id in self._celebs:
            self._invalidate_feed(follower_id)
        else:
            self._invalidate_base(follower_id)

    def unfollow(self, follower_id: int, followee_id: int) -> None:
        """Make ``follower_id`` stop following ``followee_id``, if it did."""
        if follower_id == followee_id:
            return
        if followee_id not in self._following.get(follower_id, ()):
            return

        self._following[follower_id].discard(followee_id)
        self._followers[followee_id].discard(follower_id)

        was_celeb = followee_id in self._celebs
        if was_celeb and len(self._followers[followee_id]) < self.CELEB_DEMOTE:
            self._celebs.discard(followee_id)
            for follower in self._followers[followee_id]:
                self._invalidate_base(follower)

        if was_celeb:
            self._invalidate_feed(follower_id)
        elif followee_id in self._base_sources.get(follower_id, ()):
            self._invalidate_base(follower_id)