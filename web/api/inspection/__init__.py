"""Inspection API."""

from web.api.inspection.views import get_inspections, get_presence_stats, get_status_stats

__all__ = [
    "get_inspections",
    "get_presence_stats",
    "get_status_stats",
]
