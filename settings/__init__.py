"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("KEYWORDS_DB_PATH", "keywords.duckdb")
DB_LOCK_RETRIES = int(os.getenv("KEYWORDS_DB_LOCK_RETRIES", "5"))

# Logging
LOG_DIR = Path(os.getenv("KEYWORDS_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("KEYWORDS_LOG_LEVEL", "INFO")

# Reporting
DAYS = int(os.getenv("KEYWORDS_DAYS", "30"))
GRAPH_BUCKETS = int(os.getenv("KEYWORDS_GRAPH_BUCKETS", "15"))
PER_PAGE = int(os.getenv("KEYWORDS_PER_PAGE", "25"))
TOP_N = int(os.getenv("KEYWORDS_TOP_N", "5"))

# Cache
CACHE_TTL = int(os.getenv("KEYWORDS_CACHE_TTL", str(24 * 60 * 60)))
