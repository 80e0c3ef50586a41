"""Inspection service - index coverage listings and widgets."""

from loguru import logger

from app.repositories.inspection import InspectionRepository
from app.repositories.query import Page
from settings import PER_PAGE


class InspectionService:
    """URL inspection business logic."""

    def __init__(self, inspection_repo: InspectionRepository):
        self._inspections = inspection_repo

    def get_inspections(self, page: int = 1, coverage_state: str | None = None, per_page: int = PER_PAGE) -> dict:
        """One page of inspections, optionally filtered by coverage state."""
        rows = self._inspections.get_inspections(coverage_state, Page.number(page, per_page))
        total = self._inspections.count_inspections(coverage_state)
        logger.debug("get_inspections(page={}, filter={}): {}/{}", page, coverage_state, len(rows), total)
        return {"items": [r.to_dict() for r in rows], "total": total}

    def get_presence_stats(self) -> dict[str, int]:
        """Pages per coverage state."""
        return self._inspections.get_presence_stats()

    def get_status_stats(self) -> dict[str, int]:
        """Pages per index verdict."""
        return self._inspections.get_status_stats()
