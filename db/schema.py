from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the scrape results table and its index (idempotent)."""
    cur = conn.cursor()

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS github_data (\n"
            "  id INTEGER PRIMARY KEY AUTOINCREMENT,\n"
            "  resident TEXT NOT NULL DEFAULT 'Unknown',\n"
            "  revenue INTEGER NOT NULL DEFAULT 0,\n"
            "  detail TEXT NOT NULL DEFAULT 'No pinned repo',\n"
            "  house TEXT NOT NULL DEFAULT 'Unknown House',\n"
            "  timestamp TEXT NOT NULL\n"
            ")"
        )
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_github_data_timestamp ON github_data(timestamp);")

    conn.commit()
