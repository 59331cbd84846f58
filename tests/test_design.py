import pytest

from algosuite.design import LRUCache, Twitter


def test_lru_cache_standard_sequence():
    cache = LRUCache(2)
    cache.put(1, 1)
    cache.put(2, 2)
    assert cache.get(1) == 1
    cache.put(3, 3)
    assert cache.get(2) == -1
    cache.put(4, 4)
    assert cache.get(1) == -1
    assert cache.get(3) == 3
    assert cache.get(4) == 4


def test_lru_cache_update_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 10)
    cache.put(2, 20)
    cache.put(1, 11)
    cache.put(3, 30)
    assert cache.get(1) == 11
    assert cache.get(2) == -1
    assert cache.get(3) == 30
    assert len(cache) == 2


def test_lru_cache_missing_key():
    cache = LRUCache(3)
    assert cache.get(42) == -1


def test_lru_cache_zero_capacity_holds_nothing():
    cache = LRUCache(0)
    cache.put(1, 1)
    assert cache.get(1) == -1
    assert len(cache) == 0


@pytest.mark.parametrize("capacity", [1, 3, 5])
def test_lru_cache_never_exceeds_capacity(capacity):
    cache = LRUCache(capacity)
    for key in range(20):
        cache.put(key, key * 2)
        assert len(cache) <= capacity
    assert cache.get(19) == 38
    assert cache.get(0) == -1


def test_twitter_standard_sequence():
    twitter = Twitter()
    twitter.post_tweet(1, 5)
    assert twitter.get_news_feed(1) == [5]
    twitter.follow(1, 2)
    twitter.post_tweet(2, 6)
    assert twitter.get_news_feed(1) == [6, 5]
    twitter.unfollow(1, 2)
    assert twitter.get_news_feed(1) == [5]


def test_twitter_unknown_user_has_empty_feed():
    assert Twitter().get_news_feed(7) == []


def test_twitter_feed_limited_to_newest_ten():
    twitter = Twitter()
    ids = list(range(15))
    for tweet_id in ids:
        twitter.post_tweet(1, tweet_id)
    feed = twitter.get_news_feed(1)
    assert len(feed) == Twitter.FEED_SIZE
    assert feed == ids[::-1][: Twitter.FEED_SIZE]


def test_twitter_merges_followees_by_time():
    twitter = Twitter()
    twitter.follow(1, 2)
    twitter.follow(1, 3)
    twitter.post_tweet(2, 100)
    twitter.post_tweet(3, 200)
    twitter.post_tweet(1, 300)
    twitter.post_tweet(2, 400)
    assert twitter.get_news_feed(1) == [400, 300, 200, 100]
    assert twitter.get_news_feed(2) == [400, 100]


def test_twitter_follow_self_and_repeat_are_noops():
    twitter = Twitter()
    twitter.post_tweet(1, 1)
    twitter.follow(1, 1)
    twitter.post_tweet(2, 2)
    twitter.follow(1, 2)
    twitter.follow(1, 2)
    assert twitter.get_news_feed(1) == [2, 1]
    twitter.unfollow(1, 2)
    assert twitter.get_news_feed(1) == [1]


def test_twitter_unfollow_unknown_is_noop():
    twitter = Twitter()
    twitter.post_tweet(1, 9)
    twitter.unfollow(1, 2)
    twitter.unfollow(1, 1)
    assert twitter.get_news_feed(1) == [9]


def test_twitter_cached_feed_reflects_new_posts():
    twitter = Twitter()
    twitter.follow(1, 2)
    twitter.post_tweet(2, 10)
    assert twitter.get_news_feed(1) == [10]
    assert twitter.get_news_feed(1) == [10]
    twitter.post_tweet(2, 11)
    assert twitter.get_news_feed(1) == [11, 10]


def test_twitter_returned_feed_is_a_copy():
    twitter = Twitter()
    twitter.post_tweet(1, 3)
    feed = twitter.get_news_feed(1)
    feed.append(99)
    assert twitter.get_news_feed(1) == [3]


def test_twitter_celebrity_tweets_reach_followers():
    twitter = Twitter()
    celeb = 0
    twitter.post_tweet(celeb, 500)
    followers = range(1, Twitter.CELEB_PROMOTE + 1)
    for follower in followers:
        twitter.follow(follower, celeb)
    last = followers[-1]
    assert twitter.get_news_feed(last) == [500]
    twitter.post_tweet(last, 600)
    twitter.post_tweet(celeb, 700)
    assert twitter.get_news_feed(last) == [700, 600, 500]
    twitter.unfollow(last, celeb)
    assert twitter.get_news_feed(last) == [600]


def test_twitter_demoted_celebrity_still_in_feeds():
    twitter = Twitter()
    celeb = 0
    followers = list(range(1, Twitter.CELEB_PROMOTE + 1))
    for follower in followers:
        twitter.follow(follower, celeb)
    twitter.post_tweet(celeb, 42)
    kept = followers[0]
    assert twitter.get_news_feed(kept) == [42]
    dropped = followers[-(Twitter.CELEB_PROMOTE - Twitter.CELEB_DEMOTE + 1):]
    for follower in dropped:
        twitter.unfollow(follower, celeb)
    assert twitter.get_news_feed(kept) == [42]
    twitter.post_tweet(celeb, 43)
    assert twitter.get_news_feed(kept) == [43, 42]
    assert twitter.get_news_feed(dropped[0]) == []