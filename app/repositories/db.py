"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.models import ALL_DDL
from settings import DB_LOCK_RETRIES, DB_PATH

_local = threading.local()


def _in_memory() -> bool:
    return DB_PATH == ":memory:"


def db_exists() -> bool:
    """Check if database file exists."""
    return _in_memory() or Path(DB_PATH).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create all tables, sequences and indexes (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _log_lock_retry(retry_state) -> None:
    logger.warning("DB locked: {} (attempt {})", DB_PATH, retry_state.attempt_number)


# A second process holding the write lock makes connect() raise IOException.
@retry(
    stop=stop_after_attempt(DB_LOCK_RETRIES),
    wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
    retry=retry_if_exception_type(duckdb.IOException),
    before_sleep=_log_lock_retry,
    reraise=True,
)
def _connect(read_only: bool) -> duckdb.DuckDBPyConnection:
    return duckdb.connect(DB_PATH, read_only=read_only and not _in_memory())


def _ensure_db_exists() -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists():
        logger.warning("DB not found: {}. Creating empty DB.", DB_PATH)
        conn = _connect(read_only=False)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if not hasattr(_local, "conn") or _local.conn is None:
        _ensure_db_exists()
        _local.conn = _connect(read_only)
        if not read_only or _in_memory():
            init_tables(_local.conn)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def reconnect_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Force reconnect."""
    close_db()
    return get_db(read_only)


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a writable connection (for maintenance scripts)."""
    _ensure_db_exists()
    conn = _connect(read_only=False)
    init_tables(conn)
    return conn
