"""Tests for action history segmentation."""

from datetime import datetime, timedelta, timezone

import pytest

from app.models.cycletime import Action, ActionType, Card, DwellSegment
from app.services.cycletime import period_of, segment_actions, sort_actions

CARD = Card(id="card1", name="Fix login")
LISTS = {"A": "Backlog", "B": "Doing", "C": "Done"}
NOW = datetime(2024, 1, 10, tzinfo=timezone.utc)


def ts(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 1, day, hour, tzinfo=timezone.utc)


def create(at: datetime) -> Action:
    return Action(type=ActionType.CREATE_CARD, timestamp=at)


def move(at: datetime, source: str | None, dest: str | None) -> Action:
    return Action(type=ActionType.MOVE_CARD, timestamp=at, source_list_id=source, dest_list_id=dest)


class TestSortActions:
    def test_ascending(self):
        actions = [move(ts(3), "B", "C"), create(ts(1)), move(ts(2), "A", "B")]
        assert [a.timestamp for a in sort_actions(actions)] == [ts(1), ts(2), ts(3)]

    def test_ties_keep_order(self):
        first, second = move(ts(2), "A", "B"), move(ts(2), "B", "C")
        assert sort_actions([first, second]) == [first, second]


class TestPeriod:
    def test_utc_date(self):
        assert period_of(ts(2, 23)) == "2024-01-02"

    def test_offset_converted_to_utc(self):
        local = datetime(2024, 1, 2, 1, tzinfo=timezone(timedelta(hours=3)))
        assert period_of(local) == "2024-01-01"

    def test_naive_is_utc(self):
        assert period_of(datetime(2024, 1, 5, 12)) == "2024-01-05"


class TestSegmentActions:
    def test_create_then_two_moves(self):
        actions = [create(ts(1)), move(ts(2), "A", "B"), move(ts(3), "B", "C")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert result == [
            DwellSegment("card1", "Fix login", "A", "Backlog", "2024-01-02", 86400.0),
            DwellSegment("card1", "Fix login", "C", "Done", "2024-01-01", 9 * 86400.0),
        ]

    def test_only_create(self):
        assert segment_actions(CARD, [create(ts(1))], LISTS, now=NOW) == []

    def test_empty_log(self):
        assert segment_actions(CARD, [], LISTS, now=NOW) == []

    def test_truncated_history_uses_first_move_as_entry(self):
        actions = [move(ts(2), "A", "B"), move(ts(4), "B", "C")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        # First move only sets the entry time; the last one is open from it
        assert len(result) == 1
        assert result[0].list_id == "C"
        assert result[0].period == "2024-01-02"
        assert result[0].cycle_time_secs == 8 * 86400.0

    def test_single_move_without_create(self):
        assert segment_actions(CARD, [move(ts(2), "A", "B")], LISTS, now=NOW) == []

    def test_single_move_after_create_is_open(self):
        result = segment_actions(CARD, [create(ts(1)), move(ts(2), "A", "B")], LISTS, now=NOW)

        assert len(result) == 1
        assert result[0].list_id == "B"
        assert result[0].list_name == "Doing"
        assert result[0].period == "2024-01-01"
        assert result[0].cycle_time_secs == 9 * 86400.0

    def test_closed_segment_charged_to_list_left(self):
        actions = [create(ts(1)), move(ts(2), "A", "B"), move(ts(5), "B", "C")]

        closed = segment_actions(CARD, actions, LISTS, now=NOW)[0]

        assert closed.list_id == "A"
        assert closed.cycle_time_secs == 3 * 86400.0

    def test_entry_time_not_advanced_by_closed_segments(self):
        actions = [create(ts(1)), move(ts(2), "A", "B"), move(ts(3), "B", "C"), move(ts(4), "C", "A")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert [s.list_id for s in result] == ["A", "B", "A"]
        assert result[-1].period == "2024-01-01"
        assert result[-1].cycle_time_secs == 9 * 86400.0

    @pytest.mark.parametrize("day", [2, 4, 6])
    def test_move_without_destination_adds_nothing(self, day):
        actions = sort_actions(
            [create(ts(1)), move(ts(3), "A", "B"), move(ts(5), "B", "C"), move(ts(day), "Z", None)]
        )

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert len(result) == 2
        assert "Z" not in [s.list_id for s in result]

    def test_moves_without_destination_only(self):
        actions = [create(ts(1)), move(ts(2), "A", None), move(ts(3), "B", None)]
        assert segment_actions(CARD, actions, LISTS, now=NOW) == []

    def test_trailing_move_without_destination_closes_previous(self):
        actions = [create(ts(1)), move(ts(2), "A", "B"), move(ts(3), "B", None)]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert result == [DwellSegment("card1", "Fix login", "A", "Backlog", "2024-01-02", 86400.0)]

    def test_zero_duration_dropped(self):
        actions = [create(ts(1)), move(ts(2), "A", "B"), move(ts(2), "B", "C")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert [s.list_id for s in result] == ["C"]

    def test_open_segment_in_future_dropped(self):
        actions = [create(ts(20)), move(ts(21), "A", "B")]
        assert segment_actions(CARD, actions, LISTS, now=NOW) == []

    def test_sub_centisecond_duration_dropped(self):
        start = ts(2)
        actions = [create(ts(1)), move(start, "A", "B"), move(start + timedelta(milliseconds=4), "B", "C")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert [s.list_id for s in result] == ["C"]

    def test_rounded_to_two_decimals(self):
        start = ts(2)
        actions = [create(ts(1)), move(start, "A", "B"), move(start + timedelta(seconds=1.23456), "B", "C")]

        assert segment_actions(CARD, actions, LISTS, now=NOW)[0].cycle_time_secs == 1.23

    def test_closed_move_without_source_skipped(self):
        actions = [create(ts(1)), move(ts(2), None, "B"), move(ts(3), "B", "C")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert [s.list_id for s in result] == ["C"]

    def test_unknown_list_has_no_name(self):
        actions = [create(ts(1)), move(ts(2), "X", "B"), move(ts(3), "B", "C")]

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert result[0].list_id == "X"
        assert result[0].list_name is None

    def test_all_durations_positive(self):
        actions = sort_actions(
            [create(ts(1))]
            + [move(ts(d, h), "A", "B") for d in range(2, 6) for h in (0, 0, 6)]
            + [move(ts(6), "B", None), move(ts(7), "B", "C")]
        )

        result = segment_actions(CARD, actions, LISTS, now=NOW)

        assert result
        assert all(s.cycle_time_secs > 0 for s in result)

    def test_default_now_is_current_time(self):
        now = datetime.now(timezone.utc)
        actions = [create(now - timedelta(hours=1)), move(now - timedelta(minutes=30), "A", "B")]

        result = segment_actions(CARD, actions, LISTS)

        assert len(result) == 1
        assert 3599 < result[0].cycle_time_secs < 3700


class TestDwellSegment:
    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            DwellSegment("c", "n", "l", "L", "2024-01-01", -1.0)
