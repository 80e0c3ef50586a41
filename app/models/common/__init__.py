"""Common models - base classes, windows and shared tables."""

from app.models.common.base import BaseEntity
from app.models.common.cache import CACHE_DDL
from app.models.common.options import OPTIONS_DDL
from app.models.common.window import Bucket, Window, WindowPair

__all__ = [
    "BaseEntity",
    "Bucket",
    "Window",
    "WindowPair",
    "CACHE_DDL",
    "OPTIONS_DDL",
]
