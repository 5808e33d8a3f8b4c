"""Unit conversions for cycle time reporting."""

import math

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


def decompose(seconds: float) -> dict[str, float | int]:
    """Split a duration into unit totals and a days/hours/minutes/seconds breakdown."""
    return {
        "total_seconds": round(seconds, 2),
        "total_minutes": round(seconds / SECONDS_PER_MINUTE, 2),
        "total_hours": round(seconds / SECONDS_PER_HOUR, 2),
        "days": math.floor(seconds / SECONDS_PER_DAY),
        "hours": math.floor((seconds % SECONDS_PER_DAY) / SECONDS_PER_HOUR),
        "minutes": math.floor((seconds % SECONDS_PER_HOUR) / SECONDS_PER_MINUTE),
        "seconds": math.floor(seconds % SECONDS_PER_MINUTE),
    }


def format_duration(seconds: float) -> str:
    """Compact label, e.g. '1d 1h 1m 1s'."""
    d = decompose(seconds)
    return f"{d['days']}d {d['hours']}h {d['minutes']}m {d['seconds']}s"
