"""Inspection repository - URL index coverage results."""

from app.models import Inspection
from app.repositories.base import BaseRepository
from app.repositories.query import Page, Query

_COLUMNS = (
    "page",
    "index_verdict",
    "indexing_state",
    "coverage_state",
    "page_fetch_state",
    "robots_txt_state",
    "google_canonical",
    "user_canonical",
    "rich_results_items",
    "last_crawl_time",
)


def _filtered(coverage_state: str | None) -> Query:
    query = Query()
    if coverage_state:
        query.equals("coverage_state", coverage_state)
    return query


class InspectionRepository(BaseRepository):
    """Repository for per-page URL inspection rows."""

    def get_inspections(self, coverage_state: str | None = None, page: Page | None = None) -> list[Inspection]:
        """Inspection rows, optionally restricted to one coverage state."""
        query = _filtered(coverage_state).ordered("page").paginate(page)
        rows = self.select(f"SELECT {', '.join(_COLUMNS)} FROM inspection", query)
        return [Inspection(**dict(zip(_COLUMNS, r))) for r in rows]

    def count_inspections(self, coverage_state: str | None = None) -> int:
        """Number of rows `get_inspections` would page through."""
        rows = self.select("SELECT COUNT(*) FROM inspection", _filtered(coverage_state))
        return int(rows[0][0])

    def get_presence_stats(self) -> dict[str, int]:
        """Pages per coverage state ("Presence on Google")."""
        rows = self.fetchall(
            """
            SELECT coverage_state, COUNT(*) FROM inspection
            WHERE coverage_state IS NOT NULL
            GROUP BY coverage_state
            ORDER BY COUNT(*) DESC, coverage_state
            """
        )
        return {r[0]: int(r[1]) for r in rows}

    def get_status_stats(self) -> dict[str, int]:
        """Pages per index verdict ("Top Statuses")."""
        rows = self.fetchall(
            """
            SELECT index_verdict, COUNT(*) FROM inspection
            WHERE index_verdict IS NOT NULL
            GROUP BY index_verdict
            ORDER BY COUNT(*) DESC, index_verdict
            """
        )
        return {r[0]: int(r[1]) for r in rows}
