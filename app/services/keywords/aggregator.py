"""Metrics aggregator - windowed, diffed keyword metrics.

Two independent correlations are merged per key:

* position: the representative (most recent) sample of each window, current
  left-joined to compare; a key missing from the compare window is diffed
  against position 100;
* volume: clicks and impressions summed, ctr averaged over every sample of
  each window; a missing compare value counts as 0.
"""

import math
from collections.abc import Iterable
from enum import StrEnum

from loguru import logger

from app.models import Dimension, KeywordMetrics, MetricValue, SortKey, SortOrder, WindowPair
from app.models.keywords import normalize_keyword
from app.repositories.keywords import TrackedKeywordRepository
from app.repositories.performance import PerformanceRepository
from app.repositories.query import Page
from app.services.common import Deadline

POSITION_SENTINEL = 100.0


class Movement(StrEnum):
    """Direction of the position difference."""

    IMPROVED = "improved"
    DECLINED = "declined"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (SQL ROUND)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class _MetricsAccumulator:
    """Collects per-key metrics from both correlation phases."""

    def __init__(self, display: dict[str, str]):
        self._display = display
        self._rows: dict[str, KeywordMetrics] = {}

    def _entry(self, key: str) -> KeywordMetrics:
        if key not in self._rows:
            self._rows[key] = KeywordMetrics(query=self._display.get(key, key))
        return self._rows[key]

    def add_position(self, key: str, current: float, previous: float | None) -> None:
        baseline = POSITION_SENTINEL if previous is None else previous
        self._entry(key).position = MetricValue(
            total=float(round_half_away(current)),
            difference=float(round_half_away(current - baseline)),
        )

    def add_volume(
        self,
        key: str,
        current: tuple[str, int, int, float, float],
        previous: tuple[str, int, int, float, float] | None,
    ) -> None:
        _, clicks, impressions, _, ctr = current
        _, old_clicks, old_impressions, _, old_ctr = previous or (key, 0, 0, 0.0, 0.0)
        entry = self._entry(key)
        entry.clicks = MetricValue(total=int(clicks), difference=int(clicks - old_clicks))
        entry.impressions = MetricValue(total=int(impressions), difference=int(impressions - old_impressions))
        entry.ctr = MetricValue(total=float(ctr), difference=float(ctr - old_ctr))

    def build(self) -> dict[str, KeywordMetrics]:
        return dict(self._rows)


def _matches(metrics: KeywordMetrics, movement: Movement | None) -> bool:
    if movement == Movement.IMPROVED:
        return metrics.position.difference < 0
    if movement == Movement.DECLINED:
        return metrics.position.difference > 0
    return True


def _ordered(rows: list[KeywordMetrics], sort: SortKey, order: SortOrder) -> list[KeywordMetrics]:
    # Sort by key first so ties come out in a stable, deterministic order.
    rows = sorted(rows, key=lambda m: m.keyword)
    return sorted(rows, key=lambda m: m.sort_value(sort), reverse=order == SortOrder.DESC)


class MetricsAggregator:
    """Computes current-window totals and compare-window diffs per keyword."""

    def __init__(self, performance_repo: PerformanceRepository, keyword_repo: TrackedKeywordRepository):
        self._performance = performance_repo
        self._keywords = keyword_repo

    def aggregate(
        self,
        keywords: Iterable[str],
        windows: WindowPair,
        *,
        dimension: Dimension = Dimension.QUERY,
        movement: Movement | None = None,
        sort: SortKey = SortKey.DIFF_POSITION,
        order: SortOrder = SortOrder.ASC,
        page: Page | None = None,
        include_zero_keywords: bool = False,
        deadline: Deadline | None = None,
    ) -> dict[str, KeywordMetrics]:
        """Metrics keyed by normalized keyword (or page), in the requested order.

        With `include_zero_keywords`, active tracked keywords without data are
        appended with zeroed metrics after the ordered rows, before `page` is
        applied.
        """
        deadline = deadline or Deadline()
        display = self._display_names(keywords, dimension)

        data: dict[str, KeywordMetrics] = {}
        if display:
            data = self._correlate(list(display.values()), windows, dimension, display, deadline)

        rows = _ordered([m for m in data.values() if _matches(m, movement)], sort, order)
        if include_zero_keywords and dimension == Dimension.QUERY:
            deadline.check("zero keyword completion")
            rows.extend(self._zero_rows({m.keyword for m in rows}))

        if page is not None:
            end = None if page.limit is None else page.offset + page.limit
            rows = rows[page.offset : end]
        result = {m.keyword if dimension == Dimension.QUERY else m.query: m for m in rows}

        logger.info("Aggregated {} {} rows ({} with data)", len(result), dimension, len(data))
        return result

    def _zero_rows(self, present: set[str]) -> list[KeywordMetrics]:
        """Zeroed metrics for active keywords missing from `present`."""
        rows = []
        for keyword in self._keywords.active_keywords():
            if normalize_keyword(keyword) not in present:
                rows.append(KeywordMetrics(query=keyword))
        return rows

    def _correlate(
        self,
        values: list[str],
        windows: WindowPair,
        dimension: Dimension,
        display: dict[str, str],
        deadline: Deadline,
    ) -> dict[str, KeywordMetrics]:
        deadline.check("current positions")
        current = {k: p for k, p, _ in self._performance.representative_positions(values, windows.current, dimension)}
        deadline.check("compare positions")
        previous = {k: p for k, p, _ in self._performance.representative_positions(values, windows.compare, dimension)}

        deadline.check("current volume")
        volume = {r[0]: r for r in self._performance.volume_aggregates(values, windows.current, dimension)}
        deadline.check("compare volume")
        old_volume = {r[0]: r for r in self._performance.volume_aggregates(values, windows.compare, dimension)}

        acc = _MetricsAccumulator(display)
        for key, position in current.items():
            acc.add_position(key, position, previous.get(key))
        for key, row in volume.items():
            acc.add_volume(key, row, old_volume.get(key))
        return acc.build()

    @staticmethod
    def _display_names(values: Iterable[str], dimension: Dimension) -> dict[str, str]:
        """Map store key -> display string, first spelling wins."""
        display: dict[str, str] = {}
        for value in values:
            if not value or not value.strip():
                continue
            key = normalize_keyword(value) if dimension == Dimension.QUERY else value
            display.setdefault(key, value.strip() if dimension == Dimension.QUERY else value)
        return display
