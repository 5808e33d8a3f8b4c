"""Cycle time API response schemas."""

from pydantic import BaseModel


class AverageItem(BaseModel):
    """Mean cycle time for a list."""

    list_name: str
    avg_cycle_time: float


class AveragesResponse(BaseModel):
    """Per-list averages response."""

    window: str
    since: str | None
    items: list[AverageItem]


class BreakdownItem(BaseModel):
    """Mean cycle time for a list, decomposed into units."""

    list_name: str
    avg_cycle_time: float
    total_minutes: float
    total_hours: float
    days: int
    hours: int
    minutes: int
    seconds: int


class BreakdownResponse(BaseModel):
    """Per-list breakdown response."""

    window: str
    since: str | None
    items: list[BreakdownItem]
