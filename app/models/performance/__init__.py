"""Performance domain models - raw search console samples."""

from app.models.performance.sample import SAMPLE_DDL, SAMPLE_INDEXES, Dimension, PerformanceSample

__all__ = [
    "SAMPLE_DDL",
    "SAMPLE_INDEXES",
    "Dimension",
    "PerformanceSample",
]
