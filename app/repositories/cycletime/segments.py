"""Segment repository - dwell segments stored in the `cards` table."""

from collections.abc import Iterable

import polars as pl
from loguru import logger

from app.models.cycletime import CARDS_AVG_REBUILD, DwellSegment
from app.repositories.base import BaseRepository

_COLUMNS = "card_id, card_name, list_id, list_name, period, cycle_time_secs"

_SCHEMA = {
    "card_id": pl.Utf8,
    "card_name": pl.Utf8,
    "list_id": pl.Utf8,
    "list_name": pl.Utf8,
    "period": pl.Utf8,
    "cycle_time_secs": pl.Float64,
}


class SegmentRepository(BaseRepository):
    """Idempotent writes and read queries for dwell segments."""

    def upsert_or_skip(self, segment: DwellSegment) -> None:
        """Insert keyed by (card_id, list_id); an existing key is left untouched."""
        self._require_writable("insert segments")
        self.execute(
            f"INSERT OR IGNORE INTO cards ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
            list(segment.as_row()),
        )

    def commit_batch(self, segments: Iterable[DwellSegment]) -> int:
        """Insert all segments in one transaction; returns rows actually added."""
        self._require_writable("commit segments")

        # First occurrence of a key wins, also within the batch
        unique: dict[tuple[str, str], DwellSegment] = {}
        for s in segments:
            unique.setdefault(s.key, s)
        if not unique:
            return 0

        segments_df = pl.DataFrame(
            [s.as_row() for s in unique.values()],
            schema=_SCHEMA,
            orient="row",
        )

        before = self.count()
        self.execute("BEGIN TRANSACTION")
        try:
            self._db.register("segments_df", segments_df)
            self.execute(f"INSERT OR IGNORE INTO cards ({_COLUMNS}) SELECT {_COLUMNS} FROM segments_df")
            self.execute("COMMIT")
        except Exception:
            self.execute("ROLLBACK")
            logger.error("Segment batch rolled back ({} rows)", len(unique))
            raise
        finally:
            self._db.unregister("segments_df")

        inserted = self.count() - before
        logger.info("Segments: +{} new ({} skipped)", inserted, len(unique) - inserted)
        return inserted

    def count(self) -> int:
        """Number of stored segments."""
        return self.fetchone("SELECT COUNT(*) FROM cards")[0]

    def segments_for_list(self, list_name: str) -> list[DwellSegment]:
        """All segments attributed to a list, oldest period first."""
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM cards WHERE list_name = ? ORDER BY period, card_id",
            [list_name],
        )
        return [DwellSegment(*r) for r in rows]

    def segments_for_card(self, card_id: str) -> list[DwellSegment]:
        """All segments of one card."""
        rows = self.fetchall(
            f"SELECT {_COLUMNS} FROM cards WHERE card_id = ? ORDER BY period, list_id",
            [card_id],
        )
        return [DwellSegment(*r) for r in rows]

    def average_by_list(self, since: str | None = None) -> list[tuple[str, float]]:
        """(list_name, mean cycle_time_secs), largest mean first; optional period >= since."""
        query = """
            SELECT list_name, AVG(cycle_time_secs) AS avg_cycle_time
            FROM cards
            WHERE list_name IS NOT NULL
        """
        params = []
        if since:
            query += " AND period >= ?"
            params.append(since)
        query += " GROUP BY list_name ORDER BY avg_cycle_time DESC, list_name"

        rows = self.fetchall(query, params)
        logger.debug("average_by_list(since={}): {} lists", since, len(rows))
        return [(r[0], float(r[1])) for r in rows]

    def rebuild_summary(self) -> int:
        """Drop and rebuild the derived `cards_avg` table; returns its row count."""
        self._require_writable("rebuild cards_avg")
        for stmt in CARDS_AVG_REBUILD:
            self.execute(stmt)
        rows = self.fetchone("SELECT COUNT(*) FROM cards_avg")[0]
        logger.info("cards_avg rebuilt: {} lists", rows)
        return rows
