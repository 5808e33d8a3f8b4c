"""Application settings."""

import os
from pathlib import Path

# Database
DB_PATH = os.getenv("CYCLETIME_DB_PATH", "cycletime.duckdb")

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = os.getenv("CYCLETIME_LOG_LEVEL", "INFO")

# API
API_BASE_URL = "https://api.trello.com/1"
API_TIMEOUT = 60

TRELLO_API_KEY = os.getenv("TRELLO_API_KEY")
TRELLO_API_TOKEN = os.getenv("TRELLO_API_TOKEN")
TRELLO_BOARD_ID = os.getenv("TRELLO_BOARD_ID")

# Sync
MAX_CONCURRENT = 10
BATCH_SIZE = 50
BATCH_DELAY = 1.0

# Report
REPORT_PATH = os.getenv("CYCLETIME_REPORT_PATH", "report.json")

# Web
PORT = int(os.getenv("PORT", "3001"))


class ConfigError(Exception):
    """Required configuration is missing."""


def require_trello_credentials() -> tuple[str, str]:
    """Return (key, token) or raise if either is unset."""
    missing = [
        name
        for name, value in (
            ("TRELLO_API_KEY", TRELLO_API_KEY),
            ("TRELLO_API_TOKEN", TRELLO_API_TOKEN),
        )
        if not value
    ]
    if missing:
        raise ConfigError(f"Missing environment variables: {', '.join(missing)}")
    return TRELLO_API_KEY, TRELLO_API_TOKEN
