"""URL inspection model - index coverage per page."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity

INSPECTION_DDL = """
CREATE TABLE IF NOT EXISTS inspection (
    page VARCHAR PRIMARY KEY,
    index_verdict VARCHAR,
    indexing_state VARCHAR,
    coverage_state VARCHAR,
    page_fetch_state VARCHAR,
    robots_txt_state VARCHAR,
    google_canonical VARCHAR,
    user_canonical VARCHAR,
    rich_results_items INTEGER DEFAULT 0,
    last_crawl_time TIMESTAMP,
    created TIMESTAMP DEFAULT current_timestamp
)
"""

INSPECTION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_inspection_coverage ON inspection(coverage_state)",
]

COVERAGE_STATES = (
    "Submitted and indexed",
    "URL is unknown to Google",
    "Crawled - currently not indexed",
    "Discovered - currently not indexed",
    "Indexed, not submitted in sitemap",
    "Submitted URL marked ‘noindex’",
    "Duplicate, submitted URL not selected as canonical",
)


@dataclass
class Inspection(BaseEntity):
    """Latest URL inspection result for a page."""

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
