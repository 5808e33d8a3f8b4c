"""Cycle time domain entities - board snapshot, dwell segments, report rows."""

from dataclasses import astuple, dataclass
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity


class ActionType(str, Enum):
    """Card history event kinds that drive segmentation."""

    CREATE_CARD = "CreateCard"
    MOVE_CARD = "MoveCard"


@dataclass
class Card(BaseEntity):
    """Trackable work item on the board."""

    id: str
    name: str


@dataclass
class ListDefinition(BaseEntity):
    """Workflow stage (column) a card can occupy."""

    id: str
    name: str


@dataclass
class Action(BaseEntity):
    """One audit-log entry for a card."""

    type: ActionType
    timestamp: datetime
    source_list_id: str | None = None
    dest_list_id: str | None = None


@dataclass
class DwellSegment(BaseEntity):
    """How long a card stayed associated with one list."""

    card_id: str
    card_name: str
    list_id: str
    list_name: str | None
    period: str
    cycle_time_secs: float

    def __post_init__(self):
        if self.cycle_time_secs < 0:
            raise ValueError(f"Negative cycle time for card {self.card_id}: {self.cycle_time_secs}")

    @property
    def key(self) -> tuple[str, str]:
        return self.card_id, self.list_id

    def as_row(self) -> tuple:
        """Column order of the `cards` table."""
        return astuple(self)


@dataclass
class ListAverage(BaseEntity):
    """Mean cycle time for one list."""

    list_name: str
    avg_cycle_time: float


@dataclass
class CycleTimeBreakdown(BaseEntity):
    """Mean cycle time for one list in several units."""

    list_name: str
    avg_cycle_time: float
    total_minutes: float
    total_hours: float
    days: int
    hours: int
    minutes: int
    seconds: int
