"""Keywords API views - thin layer over services."""

from app.container import container
from app.models import KeywordMetrics
from app.services.keywords import split_keywords
from settings import PER_PAGE
from web.api.errors import ValidationError, validate_days, validate_keyword, validate_page

from .schemas import (
    AddKeywordsResponse,
    GraphPointItem,
    KeywordGraphResponse,
    KeywordItem,
    KeywordPagesResponse,
    KeywordsResponse,
    MetricItem,
    OverviewResponse,
    SummaryResponse,
    TrackedRowsResponse,
)


def _item(m: KeywordMetrics) -> KeywordItem:
    return KeywordItem(
        query=m.query,
        clicks=MetricItem(total=m.clicks.total, difference=m.clicks.difference),
        impressions=MetricItem(total=m.impressions.total, difference=m.impressions.difference),
        ctr=MetricItem(total=m.ctr.total, difference=m.ctr.difference),
        position=MetricItem(total=m.position.total, difference=m.position.difference),
        graph=[GraphPointItem(date=p.date_bucket_label, position=p.position) for p in m.graph],
    )


def _windows(days: int | None):
    analytics = container.keyword_analytics
    if days is None:
        return analytics.windows()
    validate_days(days)
    return analytics.windows(days)


def get_summary() -> SummaryResponse:
    """Get tracked keyword quota and count."""
    return SummaryResponse(**container.keyword_analytics.get_tracked_keywords_summary())


def add_keywords(keywords: str) -> AddKeywordsResponse:
    """Track comma separated keywords, skipping ones already tracked."""
    candidates = split_keywords(keywords)
    if not candidates:
        raise ValidationError("No keywords given")

    addable = container.registry.extract_addable(keywords)
    if addable:
        container.registry.add(addable)

    return AddKeywordsResponse(
        added=addable,
        skipped=[k for k in candidates if k not in addable],
        summary=get_summary(),
    )


def remove_keyword(keyword: str) -> SummaryResponse:
    """Stop tracking a keyword."""
    validate_keyword(keyword)
    container.registry.remove(keyword.strip())
    return get_summary()


def get_tracked_keywords(days: int | None = None) -> KeywordsResponse:
    """Get all tracked keywords, including ones without data."""
    windows = _windows(days)
    data = container.keyword_analytics.get_tracked_keywords(windows)
    return KeywordsResponse(days=windows.days, items=[_item(m) for m in data.values()])


def get_tracked_keywords_rows(page: int = 1, days: int | None = None) -> TrackedRowsResponse:
    """Get one page of tracked keywords."""
    validate_page(page)
    windows = _windows(days)
    data = container.keyword_analytics.get_tracked_keywords_rows(page, windows, per_page=PER_PAGE)
    return TrackedRowsResponse(
        days=windows.days,
        page=page,
        per_page=PER_PAGE,
        items=[_item(m) for m in data.values()],
    )


def get_keywords_overview(days: int | None = None) -> OverviewResponse:
    """Get winning and losing keywords."""
    windows = _windows(days)
    analytics = container.keyword_analytics
    return OverviewResponse(
        days=windows.days,
        winning=[_item(m) for m in analytics.get_winning_keywords(windows).values()],
        losing=[_item(m) for m in analytics.get_losing_keywords(windows).values()],
    )


def get_tracked_overview(days: int | None = None) -> OverviewResponse:
    """Get winning and losing keywords among tracked keywords."""
    windows = _windows(days)
    analytics = container.keyword_analytics
    return OverviewResponse(
        days=windows.days,
        winning=[_item(m) for m in analytics.get_tracked_winning_keywords(windows).values()],
        losing=[_item(m) for m in analytics.get_tracked_losing_keywords(windows).values()],
    )


def get_keyword_graph(keywords: str, days: int | None = None) -> KeywordGraphResponse:
    """Get position history for comma separated keywords."""
    candidates = split_keywords(keywords)
    if not candidates:
        raise ValidationError("No keywords given")

    windows = _windows(days)
    data = container.keyword_analytics.get_keyword_graph(candidates, windows)
    series = {
        k: [GraphPointItem(date=p["date_bucket_label"], position=p["position"]) for p in points]
        for k, points in data.items()
    }
    return KeywordGraphResponse(days=windows.days, series=series)


def get_keyword_pages(query: str, days: int | None = None) -> KeywordPagesResponse:
    """Get the pages a keyword ranked for."""
    validate_keyword(query)
    windows = _windows(days)
    data = container.keyword_analytics.get_keyword_pages(query, windows)
    return KeywordPagesResponse(query=query, days=windows.days, items=[_item(m) for m in data.values()])
