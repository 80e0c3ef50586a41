"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository, OptionsRepository, get_cache_key
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
    reconnect_db,
)
from app.repositories.inspection import InspectionRepository
from app.repositories.keywords import TrackedKeywordRepository
from app.repositories.performance import PerformanceRepository
from app.repositories.query import Page, Query

__all__ = [
    # DB
    "get_db",
    "close_db",
    "reconnect_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    "Page",
    "Query",
    # Common
    "CacheRepository",
    "OptionsRepository",
    "get_cache_key",
    # Performance
    "PerformanceRepository",
    # Keywords
    "TrackedKeywordRepository",
    # Inspection
    "InspectionRepository",
]
