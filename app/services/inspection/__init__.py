"""Inspection services."""

from app.services.inspection.service import InspectionService

__all__ = ["InspectionService"]
