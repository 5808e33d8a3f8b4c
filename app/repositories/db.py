"""DuckDB connection management."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH


def db_exists(db_path: str | None = None) -> bool:
    """Check if database file exists."""
    return Path(db_path or DB_PATH).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables and indexes (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _ensure_db_exists(db_path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(db_path):
        logger.warning("DB not found: {}. Creating empty DB.", db_path)
        conn = duckdb.connect(db_path)
        try:
            init_tables(conn)
        finally:
            conn.close()


def connect(db_path: str | None = None, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a new connection; writable connections get the schema applied."""
    db_path = db_path or DB_PATH
    _ensure_db_exists(db_path)
    conn = duckdb.connect(db_path, read_only=read_only)
    if not read_only:
        init_tables(conn)
    logger.debug("DB connected: {} (read_only={})", db_path, read_only)
    return conn


@contextmanager
def open_store(db_path: str | None = None, read_only: bool = False) -> Iterator[duckdb.DuckDBPyConnection]:
    """Connection owned by one run; closed on every exit path."""
    conn = connect(db_path, read_only)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("DB connection closed")
