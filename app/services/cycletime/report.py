"""Cycle time report service - per-list averages from stored segments."""

import json
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

from loguru import logger

from app.models.cycletime import CycleTimeBreakdown, ListAverage
from app.repositories.cycletime import SegmentRepository
from app.services.cycletime import formulas

# Window name -> days back from today; None means no lower bound
WINDOWS: dict[str, int | None] = {
    "all": None,
    "week": 7,
    "month": 30,
}


def window_since(window: str, today: date | None = None) -> str | None:
    """First period (ISO date) included by a named window."""
    if window not in WINDOWS:
        raise ValueError(f"Unknown window: {window}. Expected one of {sorted(WINDOWS)}")

    days = WINDOWS[window]
    if days is None:
        return None
    today = today or datetime.now(timezone.utc).date()
    return (today - timedelta(days=days)).isoformat()


class CycleTimeReport:
    """Average cycle time per list, in raw and human-readable forms."""

    def __init__(self, repo: SegmentRepository):
        self._repo = repo
        logger.debug("CycleTimeReport initialized")

    def averages(self, since: str | None = None) -> list[ListAverage]:
        """Mean seconds per list, largest first. Lists without segments are absent."""
        return [ListAverage(list_name=name, avg_cycle_time=avg) for name, avg in self._repo.average_by_list(since)]

    def feed(self, since: str | None = None) -> dict[str, float]:
        """list_name -> mean seconds, in report order."""
        return {a.list_name: a.avg_cycle_time for a in self.averages(since)}

    def breakdown(self, since: str | None = None) -> list[CycleTimeBreakdown]:
        """Averages decomposed into minutes, hours and a d/h/m/s split."""
        result = []
        for a in self.averages(since):
            d = formulas.decompose(a.avg_cycle_time)
            result.append(
                CycleTimeBreakdown(
                    list_name=a.list_name,
                    avg_cycle_time=a.avg_cycle_time,
                    total_minutes=d["total_minutes"],
                    total_hours=d["total_hours"],
                    days=d["days"],
                    hours=d["hours"],
                    minutes=d["minutes"],
                    seconds=d["seconds"],
                )
            )
        return result

    def rebuild_summary(self) -> int:
        """Recreate the derived cards_avg table."""
        return self._repo.rebuild_summary()

    def write_json(self, path: str | Path, since: str | None = None) -> Path:
        """Write the breakdown as a static JSON artifact."""
        path = Path(path)
        data = [b.to_dict() for b in self.breakdown(since)]
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Report saved to {} ({} lists)", path, len(data))
        return path

    def log_report(self, since: str | None = None) -> None:
        """Human-readable report through the logger."""
        rows = self.breakdown(since)
        if not rows:
            logger.info("No cycle time data{}", f" since {since}" if since else "")
            return

        logger.info("--- Cycle time report{} ---", f" (since {since})" if since else "")
        for b in rows:
            logger.info(
                '"{}": {:.2f}s | {}d {}h {}m {}s | {:.2f}h | {:.2f}min',
                b.list_name,
                b.avg_cycle_time,
                b.days,
                b.hours,
                b.minutes,
                b.seconds,
                b.total_hours,
                b.total_minutes,
            )
