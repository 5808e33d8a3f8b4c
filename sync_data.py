#!/usr/bin/env python3
"""
Sync card history from Trello and report average cycle time per list.

Usage:
    python sync_data.py                      # Sync the board in TRELLO_BOARD_ID
    python sync_data.py <board_id>           # Sync a specific board
    python sync_data.py --report             # Rebuild cards_avg, print and save report.json
    python sync_data.py --report --window week   # Report only segments from the last week
    python sync_data.py --validate           # Check data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import open_container
from app.repositories.db import open_store
from app.services.cycletime import WINDOWS, window_since
from etl import run_sync
from etl.validation import validate_store
from settings import BATCH_SIZE, DB_PATH, MAX_CONCURRENT, REPORT_PATH, ConfigError
from settings.logging import setup_logging

logger = setup_logging(to_file=True)


def run_validation(db_path: str | None = None) -> bool:
    """Validate stored segments."""
    with open_store(db_path, read_only=True) as conn:
        result = validate_store(conn)

    stats = result["stats"]
    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)
    print(f"  Segments: {stats['segments']:,}")
    print(f"  Cards: {stats['cards']:,}")
    print(f"  Lists: {stats['lists']:,}")
    print(f"  Periods: {stats['first_period']} .. {stats['last_period']}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")
    print("=" * 60)
    print("✅ Data valid!" if result["valid"] else "❌ Invalid segments found.")
    print("=" * 60 + "\n")

    return result["valid"]


def run_report(window: str = "all", db_path: str | None = None) -> None:
    """Rebuild the summary table, log the report and write report.json."""
    since = window_since(window)
    with open_container(db_path, read_only=False) as container:
        container.report.rebuild_summary()
        container.report.log_report(since)
        container.report.write_json(REPORT_PATH, since)


def _option(args: list[str], name: str, default: str) -> str:
    if name in args:
        idx = args.index(name)
        if idx + 1 < len(args):
            return args[idx + 1]
        print(__doc__)
        sys.exit(1)
    return default


def main():
    args = sys.argv[1:]

    if "--validate" in args:
        ok = run_validation()
        sys.exit(0 if ok else 1)

    if "--report" in args:
        window = _option(args, "--window", "all")
        if window not in WINDOWS:
            print(f"Unknown window: {window}. Choose from: {', '.join(WINDOWS)}")
            sys.exit(1)
        run_report(window)
        return

    board_ids = [a for a in args if not a.startswith("-")]
    board_id = board_ids[0] if board_ids else None

    logger.info("Database: {}", DB_PATH)
    logger.info("Throttling: {} concurrent, {}/batch", MAX_CONCURRENT, BATCH_SIZE)

    try:
        result = run_sync(board_id=board_id, batch_size=BATCH_SIZE)
    except ConfigError as e:
        logger.error("{}", e)
        sys.exit(2)

    logger.info("Cards: {}, segments: {}, inserted: {}", result.cards, result.segments, result.inserted)

    logger.info("Running validation...")
    run_validation()


if __name__ == "__main__":
    main()
