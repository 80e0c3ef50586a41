"""Keyword analytics service - exposed operations with result caching."""

from collections.abc import Callable

from loguru import logger

from app.errors import DeadlineExceededError
from app.models import Dimension, KeywordMetrics, SortKey, SortOrder, WindowPair
from app.models.keywords import normalize_keyword
from app.repositories.common import CacheRepository, get_cache_key
from app.repositories.performance import PerformanceRepository
from app.repositories.query import Page
from app.services.common import Deadline
from app.services.keywords.aggregator import MetricsAggregator
from app.services.keywords.graph import GraphBuilder
from app.services.keywords.ranking import RankClassifier
from app.services.keywords.registry import KeywordRegistry
from app.services.keywords.windows import resolve_window_pair
from settings import DAYS, PER_PAGE, TOP_N

Metrics = dict[str, KeywordMetrics]


def _dump(data: Metrics) -> dict[str, dict]:
    return {k: m.to_dict() for k, m in data.items()}


def _load(data: dict[str, dict]) -> Metrics:
    return {k: KeywordMetrics.from_dict(d) for k, d in data.items()}


class KeywordAnalytics:
    """Tracked keyword reports with DB caching.

    Every report takes an optional `windows` pair (defaults to the configured
    lookback ending today) and an optional `timeout` in seconds. A report that
    runs out of time returns an empty result and is not cached.
    """

    def __init__(
        self,
        registry: KeywordRegistry,
        aggregator: MetricsAggregator,
        graph_builder: GraphBuilder,
        classifier: RankClassifier,
        performance_repo: PerformanceRepository,
        cache_repo: CacheRepository,
        days: int = DAYS,
    ):
        self.registry = registry
        self._aggregator = aggregator
        self._graph = graph_builder
        self._classifier = classifier
        self._performance = performance_repo
        self._cache = cache_repo
        self.days = days
        logger.debug("KeywordAnalytics initialized ({} days)", days)

    def windows(self, days: int | None = None) -> WindowPair:
        """Default window pair for a lookback."""
        return resolve_window_pair(days or self.days)

    def _get_cached_or_compute(self, key: str, compute_fn: Callable[[], Metrics]) -> Metrics:
        """Try DB cache first, compute and save if missing."""
        cached = self._cache.get(key)
        if cached is not None:
            return _load(cached)

        result = self._bounded(key, compute_fn)
        if result is not None:
            self._cache.set(key, _dump(result))
        return result or {}

    @staticmethod
    def _bounded(name: str, compute_fn: Callable[[], Metrics]) -> Metrics | None:
        """Run `compute_fn`; None when it hit its deadline."""
        try:
            return compute_fn()
        except DeadlineExceededError as e:
            logger.warning("{} aborted: {}", name, e)
            return None

    def get_tracked_keywords_summary(self) -> dict[str, int]:
        """Quota plus tracked keyword count."""
        return self.registry.summary(self.days)

    def get_winning_keywords(self, windows: WindowPair | None = None, timeout: float | None = None) -> Metrics:
        """Top winning keywords among those seen on the most recent day."""
        windows = windows or self.windows()
        deadline = Deadline(timeout)
        return self._get_cached_or_compute(
            get_cache_key("winning_keywords", windows.days),
            lambda: self._classifier.winning(windows, TOP_N, deadline=deadline),
        )

    def get_losing_keywords(self, windows: WindowPair | None = None, timeout: float | None = None) -> Metrics:
        """Top losing keywords among those seen on the most recent day."""
        windows = windows or self.windows()
        deadline = Deadline(timeout)
        return self._get_cached_or_compute(
            get_cache_key("losing_keywords", windows.days),
            lambda: self._classifier.losing(windows, TOP_N, deadline=deadline),
        )

    def get_tracked_winning_keywords(self, windows: WindowPair | None = None, timeout: float | None = None) -> Metrics:
        """Top winning keywords among tracked keywords (not cached)."""
        windows = windows or self.windows()
        keywords = self.registry.active_keywords()
        deadline = Deadline(timeout)
        return self._bounded(
            "tracked_winning_keywords",
            lambda: self._classifier.winning(windows, TOP_N, keywords=keywords, deadline=deadline),
        ) or {}

    def get_tracked_losing_keywords(self, windows: WindowPair | None = None, timeout: float | None = None) -> Metrics:
        """Top losing keywords among tracked keywords (not cached)."""
        windows = windows or self.windows()
        keywords = self.registry.active_keywords()
        deadline = Deadline(timeout)
        return self._bounded(
            "tracked_losing_keywords",
            lambda: self._classifier.losing(windows, TOP_N, keywords=keywords, deadline=deadline),
        ) or {}

    def get_tracked_keywords(
        self,
        windows: WindowPair | None = None,
        sort: SortKey = SortKey.DIFF_POSITION,
        order: SortOrder = SortOrder.ASC,
        timeout: float | None = None,
    ) -> Metrics:
        """Every active tracked keyword, zero-filled when it has no data."""
        windows = windows or self.windows()
        deadline = Deadline(timeout)

        def compute() -> Metrics:
            data = self._aggregator.aggregate(
                self.registry.active_keywords(),
                windows,
                sort=sort,
                order=order,
                include_zero_keywords=True,
                deadline=deadline,
            )
            return self._graph.attach(data, windows.current, deadline)

        return self._bounded("tracked_keywords", compute) or {}

    def get_tracked_keywords_rows(
        self,
        page: int = 1,
        windows: WindowPair | None = None,
        per_page: int = PER_PAGE,
        sort: SortKey = SortKey.DIFF_POSITION,
        order: SortOrder = SortOrder.ASC,
        timeout: float | None = None,
    ) -> Metrics:
        """One page of tracked keywords, with graphs.

        Keywords with data come first in the requested order, zero-filled
        keywords after them.
        """
        windows = windows or self.windows()
        deadline = Deadline(timeout)
        def compute() -> Metrics:
            data = self._aggregator.aggregate(
                self.registry.active_keywords(),
                windows,
                sort=sort,
                order=order,
                page=Page.number(page, per_page),
                include_zero_keywords=True,
                deadline=deadline,
            )
            return self._graph.attach(data, windows.current, deadline)

        return self._bounded("tracked_keywords_rows", compute) or {}

    def get_keyword_graph(
        self,
        keywords: list[str],
        windows: WindowPair | None = None,
        timeout: float | None = None,
    ) -> dict[str, list[dict]]:
        """Bucketed position history for `keywords` (cached per keyword set)."""
        windows = windows or self.windows()
        keywords = sorted({normalize_keyword(k) for k in keywords if k and k.strip()})
        if not keywords:
            return {}

        key = get_cache_key("keyword_graph", windows.days, *keywords)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        deadline = Deadline(timeout)
        try:
            history = self._graph.build(keywords, windows.current, deadline)
        except DeadlineExceededError as e:
            logger.warning("keyword_graph aborted: {}", e)
            return {}

        result = {k: [p.to_dict() for p in points] for k, points in history.items()}
        self._cache.set(key, result)
        return result

    def get_keyword_pages(
        self,
        keyword: str,
        windows: WindowPair | None = None,
        timeout: float | None = None,
    ) -> Metrics:
        """Metrics of the (at most 5) pages `keyword` most recently ranked for."""
        windows = windows or self.windows()
        deadline = Deadline(timeout)

        def compute() -> Metrics:
            deadline.check("keyword pages")
            pages = self._performance.keyword_pages(keyword, windows.current)
            return self._aggregator.aggregate(
                pages,
                windows,
                dimension=Dimension.PAGE,
                sort=SortKey.CLICKS,
                order=SortOrder.DESC,
                deadline=deadline,
            )

        return self._bounded("keyword_pages", compute) or {}

    def precompute_all(self, windows: WindowPair | None = None) -> None:
        """Recompute and cache the winning/losing reports."""
        windows = windows or self.windows()
        logger.info("Precomputing keyword reports for {} days...", windows.days)
        for kind in ("winning_keywords", "losing_keywords"):
            self._cache.delete(get_cache_key(kind, windows.days))
        self.get_winning_keywords(windows)
        self.get_losing_keywords(windows)
        logger.info("Keyword reports cached for {} days", windows.days)

    def clear_cache(self) -> None:
        """Drop every cached report."""
        self._cache.clear()
