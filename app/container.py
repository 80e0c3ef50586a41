"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories.common import CacheRepository, OptionsRepository
from app.repositories.inspection import InspectionRepository
from app.repositories.keywords import TrackedKeywordRepository
from app.repositories.performance import PerformanceRepository
from app.services.inspection import InspectionService
from app.services.keywords import (
    GraphBuilder,
    KeywordAnalytics,
    KeywordRegistry,
    MetricsAggregator,
    RankClassifier,
)
from settings import CACHE_TTL, DAYS, GRAPH_BUCKETS


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn: duckdb.DuckDBPyConnection | None = None, days: int = DAYS) -> None:
        """Initialize all dependencies. Call once at app startup.

        Registry and cache writes share one writable connection.
        """
        if self._initialized:
            return

        # Repositories (singletons)
        self._performance_repo = PerformanceRepository(read_only=False, conn=conn)
        self._keyword_repo = TrackedKeywordRepository(read_only=False, conn=conn)
        self._options_repo = OptionsRepository(read_only=False, conn=conn)
        self._cache_repo = CacheRepository(read_only=False, conn=conn, ttl=CACHE_TTL)
        self._inspection_repo = InspectionRepository(read_only=False, conn=conn)

        # Services (with injected repos)
        self.registry = KeywordRegistry(
            keyword_repo=self._keyword_repo,
            options_repo=self._options_repo,
            cache_repo=self._cache_repo,
            days=days,
        )

        aggregator = MetricsAggregator(
            performance_repo=self._performance_repo,
            keyword_repo=self._keyword_repo,
        )
        graph_builder = GraphBuilder(self._performance_repo, max_buckets=GRAPH_BUCKETS)

        self.keyword_analytics = KeywordAnalytics(
            registry=self.registry,
            aggregator=aggregator,
            graph_builder=graph_builder,
            classifier=RankClassifier(aggregator, graph_builder, self._performance_repo, self._keyword_repo),
            performance_repo=self._performance_repo,
            cache_repo=self._cache_repo,
            days=days,
        )

        self.inspections = InspectionService(self._inspection_repo)

        self._initialized = True

    def reset(self) -> None:
        """Forget all instances so `init` can build them again."""
        self._initialized = False


# Global container instance
container = Container()
