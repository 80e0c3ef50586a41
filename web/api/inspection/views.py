"""Inspection API views - thin layer over services."""

from app.container import container
from web.api.errors import validate_coverage_state, validate_page

from .schemas import InspectionItem, InspectionsResponse, StatsResponse


def get_inspections(page: int = 1, coverage_state: str | None = None) -> InspectionsResponse:
    """Get inspections, optionally filtered by coverage state."""
    validate_page(page)
    validate_coverage_state(coverage_state)
    data = container.inspections.get_inspections(page, coverage_state)

    return InspectionsResponse(
        page=page,
        total=data["total"],
        items=[InspectionItem(**row) for row in data["items"]],
    )


def get_presence_stats() -> StatsResponse:
    """Get the "Presence on Google" widget data."""
    return StatsResponse(items=container.inspections.get_presence_stats())


def get_status_stats() -> StatsResponse:
    """Get the "Top Statuses" widget data."""
    return StatsResponse(items=container.inspections.get_status_stats())
