"""Keywords API."""

from web.api.keywords.views import (
    add_keywords,
    get_keyword_graph,
    get_keyword_pages,
    get_keywords_overview,
    get_summary,
    get_tracked_keywords,
    get_tracked_keywords_rows,
    get_tracked_overview,
    remove_keyword,
)

__all__ = [
    "get_summary",
    "add_keywords",
    "remove_keyword",
    "get_tracked_keywords",
    "get_tracked_keywords_rows",
    "get_keywords_overview",
    "get_tracked_overview",
    "get_keyword_graph",
    "get_keyword_pages",
]
