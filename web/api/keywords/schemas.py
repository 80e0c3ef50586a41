"""Keywords API response schemas."""

from pydantic import BaseModel, Field


class MetricItem(BaseModel):
    """Metric total and difference to the compare window."""

    total: float
    difference: float


class GraphPointItem(BaseModel):
    """Position in one date bucket."""

    date: str = Field(description="Bucket label (ISO start date)")
    position: float


class KeywordItem(BaseModel):
    """Metrics for a keyword (or a page, in keyword pages)."""

    query: str
    clicks: MetricItem
    impressions: MetricItem
    ctr: MetricItem
    position: MetricItem
    graph: list[GraphPointItem] = []


class KeywordsResponse(BaseModel):
    """Keyword metrics response."""

    days: int
    items: list[KeywordItem]


class TrackedRowsResponse(KeywordsResponse):
    """Paginated tracked keywords response."""

    page: int
    per_page: int


class OverviewResponse(BaseModel):
    """Winning and losing keywords."""

    days: int
    winning: list[KeywordItem]
    losing: list[KeywordItem]


class SummaryResponse(BaseModel):
    """Tracked keyword quota and usage."""

    taken: int
    available: int
    total: int


class AddKeywordsResponse(BaseModel):
    """Result of adding tracked keywords."""

    added: list[str]
    skipped: list[str]
    summary: SummaryResponse


class KeywordGraphResponse(BaseModel):
    """Position history per keyword."""

    days: int
    series: dict[str, list[GraphPointItem]]


class KeywordPagesResponse(BaseModel):
    """Pages a keyword ranked for, with page metrics."""

    query: str
    days: int
    items: list[KeywordItem]
