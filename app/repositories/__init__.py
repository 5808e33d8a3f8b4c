"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.cycletime import SegmentRepository
from app.repositories.db import (
    connect,
    db_exists,
    init_tables,
    open_store,
)

__all__ = [
    # DB
    "connect",
    "db_exists",
    "init_tables",
    "open_store",
    # Base
    "BaseRepository",
    # Cycle time
    "SegmentRepository",
]
