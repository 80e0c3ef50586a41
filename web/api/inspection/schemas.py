"""Inspection API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class InspectionItem(BaseModel):
    """URL inspection result for a page."""

    page: str
    index_verdict: str | None = None
    indexing_state: str | None = None
    coverage_state: str | None = None
    page_fetch_state: str | None = None
    robots_txt_state: str | None = None
    google_canonical: str | None = None
    user_canonical: str | None = None
    rich_results_items: int = 0
    last_crawl_time: datetime | None = None


class InspectionsResponse(BaseModel):
    """Paginated inspections response."""

    page: int
    total: int
    items: list[InspectionItem]


class StatsResponse(BaseModel):
    """Page counts per state."""

    items: dict[str, int]
