"""Graph builder - bucketed position history per keyword."""

from collections import defaultdict
from collections.abc import Iterable, Iterator

from loguru import logger

from app.models import GraphPoint, KeywordMetrics, Window
from app.repositories.performance import PerformanceRepository
from app.services.common import Deadline
from app.services.keywords.windows import bucket_spec
from settings import GRAPH_BUCKETS


def _points(rows: list[tuple[str, float]]) -> Iterator[GraphPoint]:
    for label, position in rows:
        yield GraphPoint(date_bucket_label=label, position=position)


class GraphBuilder:
    """Turns raw daily samples into sparse, bucketed position series."""

    def __init__(self, performance_repo: PerformanceRepository, max_buckets: int = GRAPH_BUCKETS):
        self._performance = performance_repo
        self.max_buckets = max_buckets

    def series(
        self,
        keywords: Iterable[str],
        window: Window,
        deadline: Deadline | None = None,
    ) -> dict[str, Iterator[GraphPoint]]:
        """Lazy point sequence per normalized keyword, in bucket order.

        Buckets without a sample are skipped, and keywords without any
        sample are absent.
        """
        keywords = list(keywords)
        if not keywords:
            return {}

        (deadline or Deadline()).check("graph query")
        buckets = bucket_spec(window, self.max_buckets)
        rows = self._performance.bucketed_positions(keywords, window, buckets)

        grouped: dict[str, list[tuple[str, float]]] = defaultdict(list)
        for keyword, label, position, _ in rows:
            grouped[keyword].append((label, position))

        logger.debug("Graph: {} keywords, {} buckets, {} points", len(grouped), len(buckets), len(rows))
        return {keyword: _points(points) for keyword, points in grouped.items()}

    def build(self, keywords: Iterable[str], window: Window, deadline: Deadline | None = None) -> dict[str, list[GraphPoint]]:
        """Materialized `series`."""
        return {k: list(points) for k, points in self.series(keywords, window, deadline).items()}

    def attach(
        self,
        metrics: dict[str, KeywordMetrics],
        window: Window,
        deadline: Deadline | None = None,
    ) -> dict[str, KeywordMetrics]:
        """Set the `graph` of every entry in `metrics` (in place) and return it."""
        history = self.build(metrics.keys(), window, deadline)
        for key, entry in metrics.items():
            entry.graph = history.get(key, [])
        return metrics
