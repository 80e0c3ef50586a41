"""Tracked keyword repository - the keyword manager table."""

import polars as pl
from loguru import logger

from app.models.keywords import UNCATEGORIZED, TrackedKeyword, normalize_keyword
from app.repositories.base import BaseRepository
from app.repositories.query import Query


class TrackedKeywordRepository(BaseRepository):
    """Repository for tracked keyword rows."""

    def find_existing(self, keywords: list[str]) -> list[str]:
        """Stored keywords matching any of `keywords`, ignoring case."""
        query = Query().isin("lower(keyword)", {normalize_keyword(k) for k in keywords})
        rows = self.select("SELECT DISTINCT keyword FROM tracked_keyword", query)
        return [r[0] for r in rows]

    def insert(self, keywords: list[str], collection: str = UNCATEGORIZED) -> int:
        """Insert active keywords; returns the number of rows written."""
        if not keywords:
            return 0
        if self._read_only:
            raise RuntimeError("Cannot add keywords in read-only mode")

        frame = pl.DataFrame(
            {
                "keyword": keywords,
                "collection": [collection] * len(keywords),
                "is_active": [True] * len(keywords),
            }
        )
        with self.registered("new_keywords", frame):
            self.execute(
                """
                INSERT INTO tracked_keyword (keyword, collection, is_active)
                SELECT keyword, collection, is_active FROM new_keywords
                """
            )
        logger.debug("Inserted {} tracked keywords", len(keywords))
        return len(keywords)

    def delete(self, keyword: str) -> None:
        """Hard-delete every row whose keyword matches exactly."""
        if self._read_only:
            raise RuntimeError("Cannot remove keywords in read-only mode")

        self.execute("DELETE FROM tracked_keyword WHERE keyword = ?", [keyword])
        logger.debug("Deleted tracked keyword: {}", keyword)

    def count_active(self) -> int:
        """Number of distinct active keywords, ignoring case."""
        row = self.fetchone("SELECT COUNT(DISTINCT lower(keyword)) FROM tracked_keyword WHERE is_active")
        return int(row[0] or 0)

    def active_keywords(self) -> list[str]:
        """Active keywords in insertion order, one per case-insensitive value."""
        rows = self.fetchall(
            """
            SELECT arg_min(keyword, id)
            FROM tracked_keyword
            WHERE is_active
            GROUP BY lower(keyword)
            ORDER BY MIN(id)
            """
        )
        return [r[0] for r in rows]

    def get_all(self) -> list[TrackedKeyword]:
        """All registry rows."""
        rows = self.fetchall("SELECT id, keyword, collection, is_active FROM tracked_keyword ORDER BY id")
        return [TrackedKeyword(id=r[0], keyword=r[1], collection=r[2], is_active=r[3]) for r in rows]
