"""Tracked keyword (keyword manager) model."""

from dataclasses import dataclass

from app.models.common import BaseEntity

UNCATEGORIZED = "uncategorized"

TRACKED_KEYWORD_SEQ = "CREATE SEQUENCE IF NOT EXISTS tracked_keyword_id_seq START 1"

TRACKED_KEYWORD_DDL = """
CREATE TABLE IF NOT EXISTS tracked_keyword (
    id INTEGER PRIMARY KEY DEFAULT nextval('tracked_keyword_id_seq'),
    keyword VARCHAR NOT NULL,
    collection VARCHAR NOT NULL DEFAULT 'uncategorized',
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    created_at TIMESTAMP DEFAULT current_timestamp
)
"""

def normalize_keyword(keyword: str) -> str:
    """Comparison form of a keyword: trimmed and lower-cased."""
    return keyword.strip().lower()


@dataclass
class TrackedKeyword(BaseEntity):
    """Keyword the site owner asked to track."""

    keyword: str
    collection: str = UNCATEGORIZED
    is_active: bool = True
    id: int | None = None

    @property
    def normalized(self) -> str:
        return normalize_keyword(self.keyword)
