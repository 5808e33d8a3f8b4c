"""Cycle time domain models - dwell segment table and entities."""

from app.models.cycletime.card import CARDS_AVG_REBUILD, CARDS_DDL, CARDS_INDEXES
from app.models.cycletime.entities import (
    Action,
    ActionType,
    Card,
    CycleTimeBreakdown,
    DwellSegment,
    ListAverage,
    ListDefinition,
)

__all__ = [
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
]
