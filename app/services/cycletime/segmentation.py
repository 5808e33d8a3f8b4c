"""Segmentation of a card's action history into dwell segments.

The log is replayed once, oldest first, carrying a single piece of state: the
time the card entered the board (its creation, or the first move seen when the
history is truncated). Each move that is followed by another action yields a
closed segment for the list the card left, timed up to that next action. The
final move yields an open segment for the list the card currently sits in,
timed from the entry time up to ``now``.

Note that the closed interval between two moves is booked against the list
being left at the earlier move, not the list being entered.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta, timezone

from loguru import logger

from app.models.cycletime import Action, ActionType, Card, DwellSegment


def _as_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def period_of(ts: datetime) -> str:
    """Calendar date (UTC) a segment is filed under."""
    return _as_utc(ts).date().isoformat()


def sort_actions(actions: Iterable[Action]) -> list[Action]:
    """Oldest first; ties keep their incoming order."""
    return sorted(actions, key=lambda a: _as_utc(a.timestamp))


def _segment(
    card: Card,
    list_id: str,
    lists: dict[str, str],
    start: datetime,
    elapsed: timedelta,
) -> DwellSegment | None:
    secs = round(elapsed.total_seconds(), 2)
    if secs <= 0:
        logger.debug("Dropped non-positive segment: card={}, list={}, secs={}", card.id, list_id, secs)
        return None

    return DwellSegment(
        card_id=card.id,
        card_name=card.name,
        list_id=list_id,
        list_name=lists.get(list_id),
        period=period_of(start),
        cycle_time_secs=secs,
    )


def segment_actions(
    card: Card,
    actions: Sequence[Action],
    lists: dict[str, str],
    now: datetime | None = None,
) -> list[DwellSegment]:
    """Dwell segments for one card from its chronologically sorted actions.

    ``lists`` maps list id to list name; ids missing from it produce segments
    with no list name.
    """
    now = _as_utc(now) if now else datetime.now(timezone.utc)
    segments: list[DwellSegment] = []
    entry_time: datetime | None = None
    last = len(actions) - 1

    for i, action in enumerate(actions):
        ts = _as_utc(action.timestamp)

        if action.type is ActionType.CREATE_CARD:
            entry_time = ts
            continue

        # Moves without a destination are not transitions
        if action.type is not ActionType.MOVE_CARD or not action.dest_list_id:
            continue

        if entry_time is None:
            entry_time = ts
            continue

        if i == last:
            segment = _segment(card, action.dest_list_id, lists, entry_time, now - entry_time)
        elif action.source_list_id:
            next_ts = _as_utc(actions[i + 1].timestamp)
            segment = _segment(card, action.source_list_id, lists, ts, next_ts - ts)
        else:
            segment = None

        if segment:
            segments.append(segment)

    return segments
