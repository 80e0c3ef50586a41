"""Inspection domain models - URL index coverage."""

from app.models.inspection.inspection import (
    COVERAGE_STATES,
    INSPECTION_DDL,
    INSPECTION_INDEXES,
    Inspection,
)

__all__ = [
    "COVERAGE_STATES",
    "INSPECTION_DDL",
    "INSPECTION_INDEXES",
    "Inspection",
]
