"""Keyword services - registry, aggregation, graphs and ranking."""

from app.services.keywords.aggregator import POSITION_SENTINEL, MetricsAggregator, Movement
from app.services.keywords.analytics import KeywordAnalytics
from app.services.keywords.graph import GraphBuilder
from app.services.keywords.ranking import RankClassifier
from app.services.keywords.registry import KeywordRegistry, split_keywords
from app.services.keywords.windows import bucket_spec, resolve_window_pair

__all__ = [
    "POSITION_SENTINEL",
    "GraphBuilder",
    "KeywordAnalytics",
    "KeywordRegistry",
    "MetricsAggregator",
    "Movement",
    "RankClassifier",
    "bucket_spec",
    "resolve_window_pair",
    "split_keywords",
]
