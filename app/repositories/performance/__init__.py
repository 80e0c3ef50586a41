"""Performance repositories."""

from app.repositories.performance.samples import PerformanceRepository

__all__ = ["PerformanceRepository"]
