"""Rank classifier - winning and losing keywords."""

from collections.abc import Iterable

from loguru import logger

from app.models import KeywordMetrics, SortKey, SortOrder, WindowPair
from app.models.keywords import normalize_keyword
from app.repositories.keywords import TrackedKeywordRepository
from app.repositories.performance import PerformanceRepository
from app.repositories.query import Page
from app.services.common import Deadline
from app.services.keywords.aggregator import MetricsAggregator, Movement
from app.services.keywords.graph import GraphBuilder
from settings import TOP_N


class RankClassifier:
    """Top-N tracked keywords whose position improved or worsened.

    Without an explicit keyword list the universe is every tracked keyword
    with a sample on the most recent day of the current window.
    """

    def __init__(
        self,
        aggregator: MetricsAggregator,
        graph_builder: GraphBuilder,
        performance_repo: PerformanceRepository,
        keyword_repo: TrackedKeywordRepository,
    ):
        self._aggregator = aggregator
        self._graph = graph_builder
        self._performance = performance_repo
        self._keywords = keyword_repo

    def winning(
        self,
        windows: WindowPair,
        limit: int = TOP_N,
        keywords: Iterable[str] | None = None,
        deadline: Deadline | None = None,
    ) -> dict[str, KeywordMetrics]:
        """Biggest position gains first (most negative difference)."""
        return self._classify(Movement.IMPROVED, SortOrder.ASC, windows, limit, keywords, deadline)

    def losing(
        self,
        windows: WindowPair,
        limit: int = TOP_N,
        keywords: Iterable[str] | None = None,
        deadline: Deadline | None = None,
    ) -> dict[str, KeywordMetrics]:
        """Biggest position drops first (most positive difference)."""
        return self._classify(Movement.DECLINED, SortOrder.DESC, windows, limit, keywords, deadline)

    def _classify(
        self,
        movement: Movement,
        order: SortOrder,
        windows: WindowPair,
        limit: int,
        keywords: Iterable[str] | None,
        deadline: Deadline | None,
    ) -> dict[str, KeywordMetrics]:
        deadline = deadline or Deadline()
        if keywords is None:
            deadline.check("recent keywords")
            keywords = self._recent_tracked(windows)

        data = self._aggregator.aggregate(
            keywords,
            windows,
            movement=movement,
            sort=SortKey.DIFF_POSITION,
            order=order,
            page=Page(limit=limit),
            deadline=deadline,
        )
        self._graph.attach(data, windows.current, deadline)
        logger.info("Classified {} {} keywords", len(data), movement)
        return data

    def _recent_tracked(self, windows: WindowPair) -> list[str]:
        tracked = {normalize_keyword(k): k for k in self._keywords.active_keywords()}
        return [tracked[k] for k in self._performance.recent_keywords(windows.current) if k in tracked]
