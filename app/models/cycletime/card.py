"""Card dwell segment model."""

# Table name kept as `cards` for compatibility with existing databases.
CARDS_DDL = """
CREATE TABLE IF NOT EXISTS cards (
    card_id VARCHAR NOT NULL,
    card_name VARCHAR,
    list_id VARCHAR NOT NULL,
    list_name VARCHAR,
    period VARCHAR,
    cycle_time_secs DOUBLE,
    PRIMARY KEY (card_id, list_id)
)
"""

CARDS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_list_name ON cards(list_name)",
    "CREATE INDEX IF NOT EXISTS idx_period ON cards(period)",
]

# Derived from `cards`, rebuilt on every report run
CARDS_AVG_REBUILD = [
    "DROP TABLE IF EXISTS cards_avg",
    """
    CREATE TABLE cards_avg AS
    SELECT list_name, AVG(cycle_time_secs) AS avg_cycle_time
    FROM cards
    WHERE list_name IS NOT NULL
    GROUP BY list_name
    """,
]
