"""Main sync orchestration - board snapshot to stored dwell segments."""

import asyncio
from dataclasses import dataclass
from datetime import datetime

import duckdb
from loguru import logger

import settings
from app.models.cycletime import Action, ActionType, Card, DwellSegment, ListDefinition
from app.repositories.cycletime import SegmentRepository
from app.repositories.db import open_store
from app.services.cycletime import segment_actions, sort_actions
from trello_client import ActionSchema, BoardClient, CardSchema, set_api_config


@dataclass
class SyncResult:
    """Outcome of one sync run."""

    cards: int
    segments: int
    inserted: int


def to_action(schema: ActionSchema) -> Action | None:
    """Map a Trello action to a domain action; other types map to None."""
    if schema.type == "createCard":
        return Action(type=ActionType.CREATE_CARD, timestamp=schema.date)

    if schema.type == "updateCard":
        before, after = schema.data.list_before, schema.data.list_after
        return Action(
            type=ActionType.MOVE_CARD,
            timestamp=schema.date,
            source_list_id=before.id if before else None,
            dest_list_id=after.id if after else None,
        )

    return None


async def fetch_actions(
    client: BoardClient,
    cards: list[CardSchema],
    batch_size: int,
    batch_delay: float = 0.0,
) -> dict[str, list[ActionSchema]]:
    """Fetch action logs for all cards in concurrent batches. Any failure aborts."""
    result: dict[str, list[ActionSchema]] = {}
    total_batches = (len(cards) + batch_size - 1) // batch_size

    for i in range(0, len(cards), batch_size):
        batch = cards[i : i + batch_size]
        batch_num = i // batch_size + 1
        logger.debug("Actions batch {}/{}", batch_num, total_batches)

        tasks = [asyncio.ensure_future(client.actions(c.id)) for c in batch]
        try:
            logs = await asyncio.gather(*tasks)
        except BaseException:
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        for card, actions in zip(batch, logs):
            result[card.id] = actions

        if batch_delay and i + batch_size < len(cards):
            await asyncio.sleep(batch_delay)

    return result


def build_segments(
    cards: list[CardSchema],
    lists: dict[str, str],
    actions_by_card: dict[str, list[ActionSchema]],
    now: datetime | None = None,
) -> list[DwellSegment]:
    """Segment every card's log, in card order."""
    segments: list[DwellSegment] = []
    for c in cards:
        # API order is newest first; reverse so equal timestamps replay oldest first
        raw = reversed(actions_by_card.get(c.id, []))
        actions = sort_actions(a for a in map(to_action, raw) if a)
        card_segments = segment_actions(Card(id=c.id, name=c.name), actions, lists, now)
        logger.debug("Card {} ({}): {} actions, {} segments", c.id, c.name, len(actions), len(card_segments))
        segments.extend(card_segments)
    return segments


async def sync_board(
    board_id: str,
    client: BoardClient,
    conn: duckdb.DuckDBPyConnection,
    batch_size: int = 50,
    batch_delay: float = 0.0,
    now: datetime | None = None,
) -> SyncResult:
    """Fetch a board snapshot, segment all cards and persist in one transaction."""
    cards = await client.cards(board_id)
    definitions = [ListDefinition(id=lst.id, name=lst.name) for lst in await client.lists(board_id)]
    lists = {d.id: d.name for d in definitions}
    logger.info("Processing {} cards across {} lists...", len(cards), len(lists))

    actions_by_card = await fetch_actions(client, cards, batch_size, batch_delay)
    segments = build_segments(cards, lists, actions_by_card, now)

    if not segments:
        logger.info("No segments produced")
        return SyncResult(cards=len(cards), segments=0, inserted=0)

    inserted = SegmentRepository(conn, read_only=False).commit_batch(segments)
    logger.info("Sync complete: {} segments, {} inserted", len(segments), inserted)
    return SyncResult(cards=len(cards), segments=len(segments), inserted=inserted)


async def _sync_async(board_id: str, db_path: str | None, batch_size: int) -> SyncResult:
    """Async sync implementation."""
    api_key, api_token = settings.require_trello_credentials()
    set_api_config(settings.API_BASE_URL, settings.API_TIMEOUT)

    with open_store(db_path) as conn:
        async with BoardClient(api_key, api_token, max_concurrent=settings.MAX_CONCURRENT) as client:
            return await sync_board(board_id, client, conn, batch_size, settings.BATCH_DELAY)


def run_sync(board_id: str | None = None, db_path: str | None = None, batch_size: int = 50) -> SyncResult:
    """Main sync entry point."""
    board_id = board_id or settings.TRELLO_BOARD_ID
    if not board_id:
        raise settings.ConfigError("Missing environment variable: TRELLO_BOARD_ID")

    logger.info("Syncing board {}", board_id)
    return asyncio.run(_sync_async(board_id, db_path, batch_size))
