"""Shared fixtures."""

import pytest

from app.models.cycletime import DwellSegment
from app.repositories.cycletime import SegmentRepository
from app.repositories.db import open_store


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "cycletime.duckdb")


@pytest.fixture
def conn(db_path):
    with open_store(db_path) as c:
        yield c


@pytest.fixture
def repo(conn) -> SegmentRepository:
    return SegmentRepository(conn, read_only=False)


@pytest.fixture
def make_segment():
    def _make(
        card_id: str = "c1",
        list_id: str = "l1",
        list_name: str | None = "Todo",
        period: str = "2024-01-01",
        secs: float = 10.0,
    ) -> DwellSegment:
        return DwellSegment(
            card_id=card_id,
            card_name=f"Card {card_id}",
            list_id=list_id,
            list_name=list_name,
            period=period,
            cycle_time_secs=secs,
        )

    return _make
