"""Services package - service class exports."""

from app.services.inspection import InspectionService
from app.services.keywords import (
    GraphBuilder,
    KeywordAnalytics,
    KeywordRegistry,
    MetricsAggregator,
    RankClassifier,
)

__all__ = [
    "GraphBuilder",
    "InspectionService",
    "KeywordAnalytics",
    "KeywordRegistry",
    "MetricsAggregator",
    "RankClassifier",
]
