"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

import settings
from app.models import ALL_DDL

_local = threading.local()


def db_exists(path: str) -> bool:
    """Check if database file exists."""
    return path == ":memory:" or Path(path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if the governance tables already exist."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name IN ('proposals', 'votes', 'points_transactions', 'profiles')"
    ).fetchone()
    return result[0] == 4


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Create all tables and indexes (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def _ensure_db_exists(path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(path):
        logger.warning("DB not found: {}. Creating empty DB.", path)
        conn = duckdb.connect(path)
        init_tables(conn)
        conn.close()


def get_db(read_only: bool = True, path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get the calling thread's connection (path defaults to settings.DB_PATH)."""
    path = path or settings.DB_PATH
    if getattr(_local, "conn", None) is None:
        _ensure_db_exists(path)
        _local.conn = duckdb.connect(path, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", path, read_only)
    return _local.conn


def close_db() -> None:
    """Close the calling thread's connection."""
    if getattr(_local, "conn", None) is not None:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def get_write_connection(path: str | None = None) -> duckdb.DuckDBPyConnection:
    """Get a writable connection with tables in place (seeding, tests)."""
    conn = duckdb.connect(path or settings.DB_PATH)
    init_tables(conn)
    return conn
