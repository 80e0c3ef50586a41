"""Tests for the analytics cache repository."""

import duckdb
import pytest

from app.repositories import CacheRepository, get_cache_key


class BrokenConnection:
    """Connection whose every query fails."""

    def execute(self, *args):
        raise duckdb.IOException("disk gone")


class TestCacheKey:
    def test_family_and_days(self):
        assert get_cache_key("winning_keywords", 30) == "winning_keywords_30days"

    def test_parts_digest(self):
        key = get_cache_key("keyword_graph", 30, "a", "b")
        assert key.startswith("keyword_graph_30days_")
        assert key != get_cache_key("keyword_graph", 30, "a", "c")
        assert key == get_cache_key("keyword_graph", 30, "a", "b")


class TestCacheRepository:
    def test_miss(self, stack):
        assert stack.cache.get("nope") is None

    def test_roundtrip(self, stack):
        stack.cache.set("k", {"total": 3, "items": ["a"]})
        assert stack.cache.get("k") == {"total": 3, "items": ["a"]}

    def test_expires(self, stack, clock):
        stack.cache.set("k", {"v": 1}, ttl=60)
        clock.advance(59)
        assert stack.cache.get("k") == {"v": 1}
        clock.advance(1)
        assert stack.cache.get("k") is None
        assert not stack.cache.exists("k")

    def test_overwrite(self, stack):
        stack.cache.set("k", 1)
        stack.cache.set("k", 2)
        assert stack.cache.get("k") == 2

    def test_invalidate_family(self, stack):
        stack.cache.set("summary_7days", 1)
        stack.cache.set("summary_30days", 1)
        stack.cache.set("summaryx_7days", 1)
        stack.cache.invalidate("summary")
        assert stack.cache.get("summary_7days") is None
        assert stack.cache.get("summary_30days") is None
        assert stack.cache.get("summaryx_7days") == 1

    def test_clear(self, stack):
        stack.cache.set("a", 1)
        stack.cache.set("b", 2)
        stack.cache.clear()
        assert stack.cache.get("a") is None
        assert stack.cache.get("b") is None

    def test_read_only_write(self, conn):
        with pytest.raises(RuntimeError):
            CacheRepository(read_only=True, conn=conn).set("k", 1)


class TestCacheFailures:
    def test_read_degrades_to_miss(self):
        assert CacheRepository(read_only=False, conn=BrokenConnection()).get("k") is None

    def test_write_is_dropped(self):
        CacheRepository(read_only=False, conn=BrokenConnection()).set("k", 1)

    def test_invalidate_is_dropped(self):
        CacheRepository(read_only=False, conn=BrokenConnection()).invalidate("summary")

    def test_clear_is_dropped(self):
        CacheRepository(read_only=False, conn=BrokenConnection()).clear()

    def test_exists_degrades_to_false(self):
        assert not CacheRepository(read_only=False, conn=BrokenConnection()).exists("k")
