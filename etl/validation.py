"""Data validation functions."""

import duckdb


def validate_store(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate data integrity of the stored segments."""
    issues = []
    stats = {}

    counts = conn.execute(
        """
        SELECT
            COUNT(*) AS total,
            COUNT(DISTINCT card_id) AS cards,
            COUNT(DISTINCT list_name) AS lists,
            SUM(CASE WHEN list_name IS NULL THEN 1 ELSE 0 END) AS unnamed,
            SUM(CASE WHEN cycle_time_secs IS NULL OR cycle_time_secs <= 0 THEN 1 ELSE 0 END) AS non_positive
        FROM cards
        """
    ).fetchone()
    stats["segments"] = counts[0]
    stats["cards"] = counts[1]
    stats["lists"] = counts[2]
    stats["unnamed_lists"] = counts[3] or 0
    non_positive = counts[4] or 0
    stats["non_positive"] = non_positive

    if stats["segments"] == 0:
        issues.append("No segments stored")
    if stats["unnamed_lists"] > 0:
        issues.append(f"{stats['unnamed_lists']} segments reference lists missing from the board")
    if non_positive > 0:
        issues.append(f"{non_positive} segments have non-positive cycle time")

    span = conn.execute("SELECT MIN(period), MAX(period) FROM cards").fetchone()
    stats["first_period"], stats["last_period"] = span

    return {
        "valid": non_positive == 0,
        "stats": stats,
        "issues": issues,
    }
