"""Board API client - cards, lists, card actions."""

from trello_client.base import BaseClient
from trello_client.board.schemas import ActionSchema, CardSchema, ListSchema

# Card creation and list-to-list moves only
ACTION_FILTER = "updateCard:idList,createCard"


class BoardClient(BaseClient):
    """Client for the Trello board endpoints used by the cycle time sync."""

    async def cards(self, board_id: str) -> list[CardSchema]:
        """GET /boards/{board_id}/cards - open cards on a board."""
        data = await self._get(f"boards/{board_id}/cards")
        return [CardSchema.model_validate(c) for c in data]

    async def lists(self, board_id: str) -> list[ListSchema]:
        """GET /boards/{board_id}/lists - lists (columns) on a board."""
        data = await self._get(f"boards/{board_id}/lists")
        return [ListSchema.model_validate(lst) for lst in data]

    async def actions(self, card_id: str) -> list[ActionSchema]:
        """GET /cards/{card_id}/actions - create/move history, newest first."""
        data = await self._get(f"cards/{card_id}/actions", params={"filter": ACTION_FILTER})
        return [ActionSchema.model_validate(a) for a in data]
