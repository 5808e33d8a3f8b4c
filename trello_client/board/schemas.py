"""Board API schemas - cards, lists, actions."""

from datetime import datetime

from pydantic import BaseModel, Field


class CardSchema(BaseModel):
    """Card on a board."""

    id: str
    name: str = ""
    id_list: str | None = Field(alias="idList", default=None)
    closed: bool = False

    class Config:
        populate_by_name = True


class ListSchema(BaseModel):
    """List (column) on a board."""

    id: str
    name: str
    closed: bool = False
    pos: float | None = None


class ListRef(BaseModel):
    """List reference embedded in action data."""

    id: str
    name: str | None = None


class ActionDataSchema(BaseModel):
    """Payload of a card action; list fields depend on the action type."""

    list_before: ListRef | None = Field(alias="listBefore", default=None)
    list_after: ListRef | None = Field(alias="listAfter", default=None)
    list_ref: ListRef | None = Field(alias="list", default=None)

    class Config:
        populate_by_name = True


class ActionSchema(BaseModel):
    """Card action (createCard, updateCard)."""

    id: str
    type: str
    date: datetime
    data: ActionDataSchema = Field(default_factory=ActionDataSchema)
