"""Cycle time repositories."""

from app.repositories.cycletime.segments import SegmentRepository

__all__ = [
    "SegmentRepository",
]
