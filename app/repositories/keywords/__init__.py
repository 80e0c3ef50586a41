"""Keyword repositories."""

from app.repositories.keywords.tracked import TrackedKeywordRepository

__all__ = ["TrackedKeywordRepository"]
