"""Models package - DDL and entities."""

from app.models.common import BaseEntity
from app.models.cycletime import (
    CARDS_AVG_REBUILD,
    CARDS_DDL,
    CARDS_INDEXES,
    Action,
    ActionType,
    Card,
    CycleTimeBreakdown,
    DwellSegment,
    ListAverage,
    ListDefinition,
)

ALL_DDL = [
    CARDS_DDL,
    *CARDS_INDEXES,
]

__all__ = [
    # Common
    "BaseEntity",
    # Cycle time
    "CARDS_DDL",
    "CARDS_INDEXES",
    "CARDS_AVG_REBUILD",
    "ActionType",
    "Card",
    "ListDefinition",
    "Action",
    "DwellSegment",
    "ListAverage",
    "CycleTimeBreakdown",
    # All DDL
    "ALL_DDL",
]
