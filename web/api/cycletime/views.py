"""Cycle time API views - thin layer over the report service."""

from app.container import open_container
from app.services.cycletime import window_since
from web.api.errors import validate_window

from .schemas import AverageItem, AveragesResponse, BreakdownItem, BreakdownResponse


def get_averages(window: str = "all", db_path: str | None = None) -> AveragesResponse:
    """Get mean cycle time per list, largest first."""
    validate_window(window)
    since = window_since(window)

    with open_container(db_path) as container:
        data = container.report.averages(since)

    items = [AverageItem(list_name=a.list_name, avg_cycle_time=a.avg_cycle_time) for a in data]
    return AveragesResponse(window=window, since=since, items=items)


def get_breakdown(window: str = "all", db_path: str | None = None) -> BreakdownResponse:
    """Get mean cycle time per list with unit breakdown."""
    validate_window(window)
    since = window_since(window)

    with open_container(db_path) as container:
        data = container.report.breakdown(since)

    items = [BreakdownItem(**b.to_dict()) for b in data]
    return BreakdownResponse(window=window, since=since, items=items)
