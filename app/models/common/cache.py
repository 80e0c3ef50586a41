"""Analytics cache table - memoized aggregate results with expiry."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS analytics_cache (
    key VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    computed_at TIMESTAMP NOT NULL,
    expires_at TIMESTAMP NOT NULL
)
"""
