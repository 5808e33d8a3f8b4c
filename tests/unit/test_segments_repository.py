"""Tests for the segment repository."""

import pytest

from app.repositories.cycletime import SegmentRepository
from app.repositories.db import open_store


class TestUpsertOrSkip:
    def test_insert(self, repo, make_segment):
        repo.upsert_or_skip(make_segment())
        assert repo.count() == 1

    def test_same_key_twice_keeps_one(self, repo, make_segment):
        repo.upsert_or_skip(make_segment(secs=10.0))
        repo.upsert_or_skip(make_segment(secs=99.0))

        rows = repo.segments_for_card("c1")
        assert len(rows) == 1
        assert rows[0].cycle_time_secs == 10.0

    def test_same_card_other_list(self, repo, make_segment):
        repo.upsert_or_skip(make_segment(list_id="l1"))
        repo.upsert_or_skip(make_segment(list_id="l2"))
        assert repo.count() == 2

    def test_read_only_rejected(self, conn, make_segment):
        ro = SegmentRepository(conn, read_only=True)
        with pytest.raises(RuntimeError):
            ro.upsert_or_skip(make_segment())


class TestCommitBatch:
    def test_inserts_all(self, repo, make_segment):
        inserted = repo.commit_batch([make_segment(card_id="c1"), make_segment(card_id="c2")])
        assert inserted == 2
        assert repo.count() == 2

    def test_empty(self, repo):
        assert repo.commit_batch([]) == 0
        assert repo.count() == 0

    def test_duplicate_in_batch_first_wins(self, repo, make_segment):
        inserted = repo.commit_batch([make_segment(secs=1.0), make_segment(secs=2.0)])

        assert inserted == 1
        assert repo.segments_for_card("c1")[0].cycle_time_secs == 1.0

    def test_existing_rows_kept_across_runs(self, repo, make_segment):
        repo.commit_batch([make_segment(secs=1.0)])

        inserted = repo.commit_batch([make_segment(secs=5.0), make_segment(card_id="c2")])

        assert inserted == 1
        assert repo.count() == 2
        assert repo.segments_for_card("c1")[0].cycle_time_secs == 1.0

    def test_null_list_name(self, repo, make_segment):
        repo.commit_batch([make_segment(list_name=None)])
        assert repo.segments_for_card("c1")[0].list_name is None

    def test_failure_rolls_back(self, conn, make_segment):
        class FailingRepository(SegmentRepository):
            def execute(self, query, params=None):
                if query.lstrip().startswith("INSERT"):
                    raise RuntimeError("disk full")
                return super().execute(query, params)

        good = SegmentRepository(conn, read_only=False)
        good.commit_batch([make_segment(card_id="c0")])

        with pytest.raises(RuntimeError, match="disk full"):
            FailingRepository(conn, read_only=False).commit_batch([make_segment(card_id="c1")])

        assert good.count() == 1
        # Connection is usable and not left inside a transaction
        assert good.commit_batch([make_segment(card_id="c2")]) == 1

    def test_persisted_after_close(self, db_path, make_segment):
        with open_store(db_path) as conn:
            SegmentRepository(conn, read_only=False).commit_batch([make_segment()])

        with open_store(db_path, read_only=True) as conn:
            assert SegmentRepository(conn).count() == 1


class TestReads:
    def test_segments_for_list(self, repo, make_segment):
        repo.commit_batch(
            [
                make_segment(card_id="c2", list_name="Doing", period="2024-02-01"),
                make_segment(card_id="c1", list_name="Doing", period="2024-01-01"),
                make_segment(card_id="c3", list_id="l2", list_name="Done"),
            ]
        )

        rows = repo.segments_for_list("Doing")

        assert [r.card_id for r in rows] == ["c1", "c2"]

    def test_segments_for_unknown_list(self, repo):
        assert repo.segments_for_list("Nope") == []

    def test_average_by_list(self, repo, make_segment):
        repo.commit_batch(
            [
                make_segment(card_id="c1", list_id="a", list_name="A", secs=10),
                make_segment(card_id="c2", list_id="a", list_name="A", secs=30),
                make_segment(card_id="c1", list_id="b", list_name="B", secs=5),
            ]
        )
        assert repo.average_by_list() == [("A", 20.0), ("B", 5.0)]

    def test_average_skips_unnamed_lists(self, repo, make_segment):
        repo.commit_batch([make_segment(list_name=None, secs=50)])
        assert repo.average_by_list() == []

    def test_average_since(self, repo, make_segment):
        repo.commit_batch(
            [
                make_segment(card_id="c1", period="2024-01-01", secs=100),
                make_segment(card_id="c2", period="2024-03-01", secs=10),
            ]
        )
        assert repo.average_by_list(since="2024-02-01") == [("Todo", 10.0)]

    def test_indexes_exist(self, conn):
        names = {r[0] for r in conn.execute("SELECT index_name FROM duckdb_indexes() WHERE table_name = 'cards'").fetchall()}
        assert {"idx_list_name", "idx_period"} <= names


class TestRebuildSummary:
    def test_rebuild(self, repo, conn, make_segment):
        repo.commit_batch([make_segment(secs=10), make_segment(card_id="c2", secs=20)])

        assert repo.rebuild_summary() == 1
        assert conn.execute("SELECT list_name, avg_cycle_time FROM cards_avg").fetchall() == [("Todo", 15.0)]

    def test_rebuild_replaces_previous(self, repo, conn, make_segment):
        repo.commit_batch([make_segment(secs=10)])
        repo.rebuild_summary()
        repo.commit_batch([make_segment(card_id="c2", list_id="l2", list_name="Done", secs=20)])

        assert repo.rebuild_summary() == 2

    def test_read_only_rejected(self, conn):
        with pytest.raises(RuntimeError):
            SegmentRepository(conn, read_only=True).rebuild_summary()
