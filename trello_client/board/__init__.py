"""Board API client - cards, lists, card actions."""

from trello_client.board.client import ACTION_FILTER, BoardClient
from trello_client.board.schemas import ActionSchema, CardSchema, ListSchema

__all__ = [
    "ACTION_FILTER",
    "BoardClient",
    "CardSchema",
    "ListSchema",
    "ActionSchema",
]
