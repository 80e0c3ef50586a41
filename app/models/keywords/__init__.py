"""Keyword domain models - tracked keywords and computed metrics."""

from app.models.keywords.entities import (
    METRICS,
    GraphPoint,
    KeywordMetrics,
    MetricValue,
    SortKey,
    SortOrder,
)
from app.models.keywords.tracked import (
    TRACKED_KEYWORD_DDL,
    TRACKED_KEYWORD_SEQ,
    UNCATEGORIZED,
    TrackedKeyword,
    normalize_keyword,
)

__all__ = [
    "TRACKED_KEYWORD_SEQ",
    "TRACKED_KEYWORD_DDL",
    "UNCATEGORIZED",
    "TrackedKeyword",
    "normalize_keyword",
    "METRICS",
    "GraphPoint",
    "KeywordMetrics",
    "MetricValue",
    "SortKey",
    "SortOrder",
]
