"""Tests for the cache adapters."""

from __future__ import annotations

from roadtrip.adapters.cache import InMemoryCache, NullCache


def test_get_or_compute_caches_value():
    cache: InMemoryCache[dict] = InMemoryCache(name="test")
    calls = []

    def compute():
        calls.append(1)
        return {0: 0}

    assert cache.get_or_compute("0:DISTANCE", compute) == {0: 0}
    assert cache.get_or_compute("0:DISTANCE", compute) == {0: 0}
    assert len(calls) == 1
    assert cache.stats() == {
        "size": 1,
        "hits": 1,
        "misses": 1,
        "hit_rate_percent": 50.0,
    }


def test_max_size_evicts_oldest():
    cache: InMemoryCache[int] = InMemoryCache(max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 10)
    cache.set("c", 3)

    assert cache.get("a") is None
    assert cache.get("b") == 2
    assert cache.get("c") == 3
    assert cache.size() == 2


def test_clear_resets_entries_and_stats():
    cache: InMemoryCache[int] = InMemoryCache()
    cache.set("a", 1)
    cache.get("a")
    cache.get("missing")

    assert cache.clear() == 1
    assert cache.size() == 0
    assert cache.stats()["hits"] == 0
    assert cache.stats()["misses"] == 0


def test_null_cache_always_computes():
    cache: NullCache[int] = NullCache()
    cache.set("a", 1)

    assert cache.get("a") is None
    assert cache.get_or_compute("a", lambda: 2) == 2
    assert cache.clear() == 0
