"""Keyword registry - the set of tracked keywords and its quota."""

from loguru import logger

from app.models.keywords import UNCATEGORIZED, normalize_keyword
from app.repositories.common import CacheRepository, OptionsRepository, get_cache_key
from app.repositories.keywords import TrackedKeywordRepository
from settings import DAYS

SUMMARY_CACHE = "tracked_keywords_summary"
QUOTA_OPTION = "keyword_quota"


def split_keywords(candidates: str | None) -> list[str]:
    """Comma separated input -> trimmed, non-empty keywords.

    Repeats (ignoring case) keep their first spelling.
    """
    seen: set[str] = set()
    keywords = []
    for raw in (candidates or "").split(","):
        keyword = raw.strip()
        if keyword and normalize_keyword(keyword) not in seen:
            seen.add(normalize_keyword(keyword))
            keywords.append(keyword)
    return keywords


class KeywordRegistry:
    """Add, remove and count tracked keywords.

    Every mutation invalidates the cached summary for all window lengths.
    Winning/losing caches are left alone and catch up when their TTL runs out.
    """

    def __init__(
        self,
        keyword_repo: TrackedKeywordRepository,
        options_repo: OptionsRepository,
        cache_repo: CacheRepository,
        days: int = DAYS,
    ):
        self._keywords = keyword_repo
        self._options = options_repo
        self._cache = cache_repo
        self.days = days

    def extract_addable(self, candidates: str | None) -> list[str]:
        """Candidates from a comma separated list that are not tracked yet."""
        keywords = split_keywords(candidates)
        if not keywords:
            return []

        existing = {normalize_keyword(k) for k in self._keywords.find_existing(keywords)}
        return [k for k in keywords if normalize_keyword(k) not in existing]

    def add(self, keywords: list[str]) -> None:
        """Track `keywords`. Filter them with `extract_addable` first; duplicates are not re-checked here."""
        count = self._keywords.insert(list(keywords), collection=UNCATEGORIZED)
        self._cache.invalidate(SUMMARY_CACHE)
        logger.info("Added {} tracked keywords", count)

    def remove(self, keyword: str) -> None:
        """Stop tracking `keyword` (exact match). Unknown keywords are ignored."""
        self._keywords.delete(keyword)
        self._cache.invalidate(SUMMARY_CACHE)
        logger.info("Removed tracked keyword: {}", keyword)

    def count(self) -> int:
        return self._keywords.count_active()

    def active_keywords(self) -> list[str]:
        return self._keywords.active_keywords()

    def quota(self) -> dict[str, int]:
        """Usage limits synced from the account service."""
        quota = self._options.get_option(QUOTA_OPTION, {})
        return {
            "taken": int(quota.get("taken") or 0),
            "available": int(quota.get("available") or 0),
        }

    def summary(self, days: int | None = None) -> dict[str, int]:
        """Quota merged with the tracked keyword count."""
        key = get_cache_key(SUMMARY_CACHE, days or self.days)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = {**self.quota(), "total": self.count()}
        self._cache.set(key, result)
        return result
