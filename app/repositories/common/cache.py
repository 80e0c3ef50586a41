"""Cache repository - TTL'd analytics cache storage."""

import hashlib
import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import duckdb
from loguru import logger

from app.errors import StoreUnavailableError
from app.repositories.base import BaseRepository
from settings import CACHE_TTL


def utcnow() -> datetime:
    """Naive UTC timestamp, matching DuckDB TIMESTAMP columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def get_cache_key(kind: str, days: int, *parts: str) -> str:
    """Cache key for a result family and window length.

    Extra parts (e.g. a keyword list) are folded into a short digest so keys
    stay bounded.
    """
    key = f"{kind}_{days}days"
    if parts:
        digest = hashlib.md5("|".join(parts).encode()).hexdigest()[:12]
        key = f"{key}_{digest}"
    return key


class CacheRepository(BaseRepository):
    """Repository for analytics cache operations.

    Backend failures never reach the caller: reads degrade to a miss and
    writes are dropped.
    """

    def __init__(
        self,
        read_only: bool = True,
        conn: duckdb.DuckDBPyConnection | None = None,
        ttl: int = CACHE_TTL,
        clock: Callable[[], datetime] = utcnow,
    ):
        super().__init__(read_only=read_only, conn=conn)
        self.ttl = ttl
        self._clock = clock

    def get(self, key: str) -> Any | None:
        """Load a cached payload, or None when missing or expired."""
        try:
            row = self.fetchone("SELECT data, expires_at FROM analytics_cache WHERE key = ?", [key])
        except StoreUnavailableError as e:
            logger.warning("Cache read failed for {}: {}", key, e)
            return None

        if row is None:
            return None
        if row[1] <= self._clock():
            logger.debug("Cache expired: {}", key)
            return None

        logger.debug("Cache hit: {}", key)
        return json.loads(row[0])

    def set(self, key: str, data: Any, ttl: int | None = None) -> None:
        """Save a payload that expires after `ttl` seconds."""
        if self._read_only:
            raise RuntimeError("Cannot write cache in read-only mode")

        now = self._clock()
        expires_at = now + timedelta(seconds=self.ttl if ttl is None else ttl)
        try:
            self.execute(
                """
                INSERT OR REPLACE INTO analytics_cache (key, data, computed_at, expires_at)
                VALUES (?, ?, ?, ?)
                """,
                [key, json.dumps(data, default=str), now, expires_at],
            )
        except StoreUnavailableError as e:
            logger.warning("Cache write failed for {}: {}", key, e)
            return
        logger.debug("Cache saved: {} (expires {})", key, expires_at)

    def delete(self, key: str) -> None:
        """Drop a single entry."""
        try:
            self.execute("DELETE FROM analytics_cache WHERE key = ?", [key])
        except StoreUnavailableError as e:
            logger.warning("Cache delete failed for {}: {}", key, e)

    def invalidate(self, kind: str) -> None:
        """Drop every entry of a result family, whatever its window length."""
        try:
            self.execute("DELETE FROM analytics_cache WHERE starts_with(key, ?)", [f"{kind}_"])
        except StoreUnavailableError as e:
            logger.warning("Cache invalidation failed for {}: {}", kind, e)
            return
        logger.info("Cache invalidated: {}", kind)

    def clear(self) -> None:
        """Clear all cache entries."""
        if self._read_only:
            raise RuntimeError("Cannot clear cache in read-only mode")

        try:
            self.execute("DELETE FROM analytics_cache")
        except StoreUnavailableError as e:
            logger.warning("Cache clear failed: {}", e)
            return
        logger.info("All cache cleared")

    def exists(self, key: str) -> bool:
        """Check if an unexpired entry is stored under `key`."""
        try:
            row = self.fetchone(
                "SELECT COUNT(*) FROM analytics_cache WHERE key = ? AND expires_at > ?",
                [key, self._clock()],
            )
        except StoreUnavailableError as e:
            logger.warning("Cache lookup failed for {}: {}", key, e)
            return False
        return row[0] > 0
