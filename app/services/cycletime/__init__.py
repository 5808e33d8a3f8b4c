"""Cycle time services - segmentation and reporting."""

from app.services.cycletime.report import WINDOWS, CycleTimeReport, window_since
from app.services.cycletime.segmentation import period_of, segment_actions, sort_actions

__all__ = [
    "CycleTimeReport",
    "WINDOWS",
    "window_since",
    "segment_actions",
    "sort_actions",
    "period_of",
]
