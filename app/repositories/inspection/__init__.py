"""Inspection repositories."""

from app.repositories.inspection.inspection import InspectionRepository

__all__ = ["InspectionRepository"]
