"""Performance repository - read access to raw search console samples."""

from collections.abc import Iterable

import polars as pl
from loguru import logger

from app.models import Bucket, Dimension, Window
from app.models.keywords import normalize_keyword
from app.repositories.base import BaseRepository
from app.repositories.query import Query

# Queries are compared case-insensitively; pages verbatim.
_KEY = {
    Dimension.QUERY: "lower(query)",
    Dimension.PAGE: "page",
}


def _keys(values: Iterable[str], dimension: Dimension) -> list[str]:
    if dimension == Dimension.QUERY:
        return sorted({normalize_keyword(v) for v in values})
    return sorted(set(values))


class PerformanceRepository(BaseRepository):
    """Repository for the append-only performance log."""

    def representative_positions(
        self,
        values: Iterable[str],
        window: Window,
        dimension: Dimension = Dimension.QUERY,
    ) -> list[tuple[str, float, int]]:
        """Most recent sample per key in a window: (key, position, sample_id).

        Latest date wins; within a date the higher sample id wins.
        """
        key = _KEY[dimension]
        query = Query().within(window).isin(key, _keys(values, dimension))
        inner, params = query.sql(
            f"""
            SELECT {key} AS dim, position, id,
                   row_number() OVER (PARTITION BY {key} ORDER BY date DESC, id DESC) AS rn
            FROM performance_sample
            """
        )
        rows = self.fetchall(f"SELECT dim, position, id FROM ({inner}) WHERE rn = 1 ORDER BY dim", params)
        logger.debug("representative_positions({} - {}): {} rows", window.start, window.end, len(rows))
        return [(r[0], float(r[1] or 0), int(r[2])) for r in rows]

    def volume_aggregates(
        self,
        values: Iterable[str],
        window: Window,
        dimension: Dimension = Dimension.QUERY,
    ) -> list[tuple[str, int, int, float, float]]:
        """Window totals per key: (key, clicks, impressions, avg_position, avg_ctr)."""
        key = _KEY[dimension]
        query = Query().within(window).isin(key, _keys(values, dimension)).ordered("dim")
        rows = self.select(
            f"""
            SELECT {key} AS dim, SUM(clicks), SUM(impressions), AVG(position), AVG(ctr)
            FROM performance_sample
            """,
            query,
            group_by=key,
        )
        logger.debug("volume_aggregates({} - {}): {} rows", window.start, window.end, len(rows))
        return [(r[0], int(r[1] or 0), int(r[2] or 0), float(r[3] or 0), float(r[4] or 0)) for r in rows]

    def bucketed_positions(
        self,
        values: Iterable[str],
        window: Window,
        buckets: list[Bucket],
    ) -> list[tuple[str, str, float, int]]:
        """Max-id sample per keyword and bucket: (keyword, label, position, sample_id).

        Rows come in keyword order, then bucket chronology. Empty buckets
        produce no row.
        """
        keys = _keys(values, Dimension.QUERY)
        if not keys or not buckets:
            return []

        frame = pl.DataFrame(
            {
                "label": [b.label for b in buckets],
                "bucket_start": [b.start for b in buckets],
                "bucket_end": [b.end for b in buckets],
            },
            schema={"label": pl.Utf8, "bucket_start": pl.Date, "bucket_end": pl.Date},
        )
        query = Query().within(window, "s.date").isin("lower(s.query)", keys)

        with self.registered("graph_buckets", frame):
            inner, params = query.sql(
                """
                SELECT lower(s.query) AS dim, b.label, b.bucket_start, s.position, s.id,
                       row_number() OVER (PARTITION BY lower(s.query), b.label ORDER BY s.id DESC) AS rn
                FROM performance_sample s
                JOIN graph_buckets b ON s.date BETWEEN b.bucket_start AND b.bucket_end
                """
            )
            rows = self.fetchall(
                f"SELECT dim, label, position, id FROM ({inner}) WHERE rn = 1 ORDER BY dim, bucket_start",
                params,
            )

        logger.debug("bucketed_positions: {} keywords, {} buckets, {} rows", len(keys), len(buckets), len(rows))
        return [(r[0], r[1], float(r[2] or 0), int(r[3])) for r in rows]

    def recent_keywords(self, window: Window) -> list[str]:
        """Keywords with a sample on the latest date that has data in the window."""
        rows = self.fetchall(
            """
            SELECT DISTINCT lower(query)
            FROM performance_sample
            WHERE date = (SELECT MAX(date) FROM performance_sample WHERE date BETWEEN ? AND ?)
            ORDER BY 1
            """,
            [window.start, window.end],
        )
        return [r[0] for r in rows]

    def keyword_pages(self, keyword: str, window: Window, limit: int = 5) -> list[str]:
        """Distinct pages a keyword ranked for, most recent first."""
        rows = self.fetchall(
            f"""
            SELECT page
            FROM performance_sample
            WHERE lower(query) = ? AND date BETWEEN ? AND ?
            GROUP BY page
            ORDER BY MAX(date) DESC, MAX(id) DESC
            LIMIT {int(limit)}
            """,
            [normalize_keyword(keyword), window.start, window.end],
        )
        return [r[0] for r in rows]
