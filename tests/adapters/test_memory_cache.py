"""Tests for the cache adapters."""

from flight_results.adapters.cache import InMemoryCache, NullCache


class TestInMemoryCache:
    """Test suite for InMemoryCache."""

    def test_get_or_compute_caches(self):
        cache = InMemoryCache(name="test")
        calls = []

        def compute():
            calls.append(1)
            return ("a", "b")

        assert cache.get_or_compute("k", compute) == ("a", "b")
        assert cache.get_or_compute("k", compute) == ("a", "b")
        assert len(calls) == 1
        assert cache.stats()["hits"] == 1
        assert cache.stats()["misses"] == 1

    def test_get_missing_key(self):
        cache = InMemoryCache()
        assert cache.get("absent") is None
        assert cache.stats()["misses"] == 1

    def test_evicts_oldest_when_full(self):
        cache = InMemoryCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)

        assert cache.size() == 2
        assert cache.get("a") is None
        assert cache.get("b") == 2
        assert cache.get("c") == 3

    def test_overwrite_does_not_evict(self):
        cache = InMemoryCache(max_size=2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 10)

        assert cache.get("a") == 10
        assert cache.get("b") == 2

    def test_clear(self):
        cache = InMemoryCache()
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.clear() == 2
        assert cache.size() == 0
        assert cache.stats()["hits"] == 0


def test_null_cache_always_recomputes():
    cache = NullCache()
    calls = []
    cache.set("k", 1)
    assert cache.get("k") is None
    cache.get_or_compute("k", lambda: calls.append(1))
    cache.get_or_compute("k", lambda: calls.append(1))
    assert len(calls) == 2
    assert cache.size() == 0
    assert cache.clear() == 0
