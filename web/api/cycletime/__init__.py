"""Cycle time API."""

from web.api.cycletime.views import get_averages, get_breakdown

__all__ = [
    "get_averages",
    "get_breakdown",
]
