"""ETL package - data sync from Trello API to database."""

from etl.sync import SyncResult, run_sync, sync_board

__all__ = [
    "SyncResult",
    "run_sync",
    "sync_board",
]
