"""Models package - DDL and entities for all domains."""

from app.models.common import CACHE_DDL, OPTIONS_DDL, BaseEntity, Bucket, Window, WindowPair
from app.models.inspection import INSPECTION_DDL, INSPECTION_INDEXES, Inspection
from app.models.keywords import (
    TRACKED_KEYWORD_DDL,
    TRACKED_KEYWORD_SEQ,
    GraphPoint,
    KeywordMetrics,
    MetricValue,
    SortKey,
    SortOrder,
    TrackedKeyword,
)
from app.models.performance import SAMPLE_DDL, SAMPLE_INDEXES, Dimension, PerformanceSample

ALL_DDL = [
    # Performance
    SAMPLE_DDL,
    *SAMPLE_INDEXES,
    # Keywords
    TRACKED_KEYWORD_SEQ,
    TRACKED_KEYWORD_DDL,
    # Inspection
    INSPECTION_DDL,
    *INSPECTION_INDEXES,
    # Common
    CACHE_DDL,
    OPTIONS_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "Bucket",
    "Window",
    "WindowPair",
    "CACHE_DDL",
    "OPTIONS_DDL",
    # Performance
    "SAMPLE_DDL",
    "Dimension",
    "PerformanceSample",
    # Keywords
    "TRACKED_KEYWORD_DDL",
    "GraphPoint",
    "KeywordMetrics",
    "MetricValue",
    "SortKey",
    "SortOrder",
    "TrackedKeyword",
    # Inspection
    "INSPECTION_DDL",
    "Inspection",
    # All DDL
    "ALL_DDL",
]
