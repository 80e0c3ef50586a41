"""Performance sample - one daily search console row per query and page."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from app.models.common import BaseEntity

SAMPLE_DDL = """
CREATE TABLE IF NOT EXISTS performance_sample (
    id BIGINT PRIMARY KEY,
    query VARCHAR NOT NULL,
    page VARCHAR NOT NULL,
    date DATE NOT NULL,
    clicks INTEGER NOT NULL DEFAULT 0,
    impressions INTEGER NOT NULL DEFAULT 0,
    ctr DOUBLE NOT NULL DEFAULT 0,
    position DOUBLE NOT NULL DEFAULT 0
)
"""

SAMPLE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_sample_date ON performance_sample(date)",
    "CREATE INDEX IF NOT EXISTS idx_sample_query ON performance_sample(query)",
]


class Dimension(StrEnum):
    """Column a performance report is grouped by."""

    QUERY = "query"
    PAGE = "page"


@dataclass
class PerformanceSample(BaseEntity):
    """Fact row written by the search console collector."""

    id: int
    query: str
    page: str
    date: date
    clicks: int = 0
    impressions: int = 0
    ctr: float = 0.0
    position: float = 0.0
