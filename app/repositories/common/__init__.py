"""Common repositories - cache and options."""

from app.repositories.common.cache import CacheRepository, get_cache_key, utcnow
from app.repositories.common.options import OptionsRepository

__all__ = [
    "CacheRepository",
    "OptionsRepository",
    "get_cache_key",
    "utcnow",
]
