"""Services package - service class exports."""

from app.services.cycletime import CycleTimeReport, segment_actions, sort_actions

__all__ = [
    "CycleTimeReport",
    "segment_actions",
    "sort_actions",
]
