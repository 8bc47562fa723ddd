"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.errors import StoreError
from app.repositories.db import get_db


class BaseRepository:
    """Base DuckDB repository.

    Every query runs on its own cursor, so one repository can serve
    concurrent requests from several threads. DuckDB failures surface as
    StoreError.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None, read_only: bool = True):
        self._db = conn if conn is not None else get_db(read_only)
        logger.debug("{} initialized", self.__class__.__name__)

    def fetch_dicts(self, query: str, params: list | None = None) -> list[dict[str, Any]]:
        """Execute query and return rows as column-name dicts."""
        try:
            with self._db.cursor() as cursor:
                if params:
                    cursor.execute(query, params)
                else:
                    cursor.execute(query)
                columns = [d[0] for d in cursor.description]
                return [dict(zip(columns, row)) for row in cursor.fetchall()]
        except duckdb.Error as e:
            logger.error("{} query failed: {}", self.__class__.__name__, e)
            raise StoreError(f"Store query failed: {e}") from e
