"""Trello API client package."""

from trello_client.base import BaseClient, set_api_config
from trello_client.board import ActionSchema, BoardClient, CardSchema, ListSchema

__all__ = [
    # Base
    "BaseClient",
    "set_api_config",
    # Clients
    "BoardClient",
    # Schemas
    "CardSchema",
    "ListSchema",
    "ActionSchema",
]
