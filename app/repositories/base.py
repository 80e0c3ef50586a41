"""Base repository class."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
import polars as pl
from loguru import logger

from app.errors import StoreUnavailableError
from app.repositories.db import get_db, reconnect_db
from app.repositories.query import Query


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._owns_connection = conn is None
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def refresh(self) -> None:
        """Reconnect to the database (no-op for an injected connection)."""
        if self._owns_connection:
            self._db = reconnect_db(self._read_only)
        logger.info("Repository refreshed")

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self._db.execute(query, params)
            return self._db.execute(query)
        except duckdb.Error as e:
            logger.error("{} query failed: {}", self.__class__.__name__, e)
            raise StoreUnavailableError(str(e)) from e

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def select(self, select: str, query: Query, group_by: str = "") -> list:
        """Run `select` filtered, ordered and paginated by `query`."""
        sql, params = query.sql(select, group_by)
        return self.fetchall(sql, params)

    @contextmanager
    def registered(self, name: str, frame: pl.DataFrame) -> Iterator[str]:
        """Expose a DataFrame to SQL as view `name` for the duration of the block."""
        try:
            self._db.register(name, frame)
        except duckdb.Error as e:
            raise StoreUnavailableError(str(e)) from e
        try:
            yield name
        finally:
            self._db.unregister(name)
