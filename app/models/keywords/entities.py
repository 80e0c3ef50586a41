"""Keyword domain entities - computed metrics and graph points."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from app.models.common import BaseEntity
from app.models.keywords.tracked import normalize_keyword

METRICS = ("clicks", "impressions", "ctr", "position")


class SortKey(StrEnum):
    """Fields keyword metrics can be ordered by."""

    QUERY = "query"
    CLICKS = "clicks"
    IMPRESSIONS = "impressions"
    CTR = "ctr"
    POSITION = "position"
    DIFF_CLICKS = "diff_clicks"
    DIFF_IMPRESSIONS = "diff_impressions"
    DIFF_CTR = "diff_ctr"
    DIFF_POSITION = "diff_position"


class SortOrder(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass
class MetricValue(BaseEntity):
    """Current window total and its difference to the compare window."""

    total: float = 0
    difference: float = 0


@dataclass
class GraphPoint(BaseEntity):
    """Position of a keyword in one date bucket."""

    date_bucket_label: str
    position: float


@dataclass
class KeywordMetrics(BaseEntity):
    """Windowed and diffed metrics for one keyword (or page)."""

    query: str
    clicks: MetricValue = field(default_factory=MetricValue)
    impressions: MetricValue = field(default_factory=MetricValue)
    ctr: MetricValue = field(default_factory=MetricValue)
    position: MetricValue = field(default_factory=MetricValue)
    graph: list[GraphPoint] = field(default_factory=list)

    @property
    def keyword(self) -> str:
        return normalize_keyword(self.query)

    def sort_value(self, key: SortKey) -> Any:
        """Value used when ordering results by `key`."""
        if key == SortKey.QUERY:
            return self.keyword
        if key.startswith("diff_"):
            return getattr(self, key.removeprefix("diff_")).difference
        return getattr(self, key).total

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KeywordMetrics":
        """Rebuild from `to_dict()` output (e.g. a cache payload)."""
        return cls(
            query=data["query"],
            graph=[GraphPoint.from_dict(p) for p in data.get("graph", [])],
            **{m: MetricValue.from_dict(data.get(m, {})) for m in METRICS},
        )
