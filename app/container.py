"""Dependency wiring - repositories and services around one store connection."""

from collections.abc import Iterator
from contextlib import contextmanager

import duckdb

from app.repositories.cycletime import SegmentRepository
from app.repositories.db import open_store
from app.services.cycletime import CycleTimeReport


class Container:
    """Holds the repository and service instances bound to a connection."""

    def __init__(self, conn: duckdb.DuckDBPyConnection, read_only: bool = True):
        # Repositories
        self.segments = SegmentRepository(conn, read_only=read_only)

        # Services (with injected repos)
        self.report = CycleTimeReport(self.segments)


@contextmanager
def open_container(db_path: str | None = None, read_only: bool = True) -> Iterator[Container]:
    """Container whose connection is closed when the block exits."""
    with open_store(db_path, read_only=read_only) as conn:
        yield Container(conn, read_only=read_only)
