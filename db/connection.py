from __future__ import annotations

import sqlite3
from typing import Optional


def _resolve_path(db_path: str) -> str:
    # Accept "sqlite:///path/to.db" style connection strings as well as bare paths
    if db_path.startswith("sqlite:///"):
        return db_path[len("sqlite:///"):]
    return db_path


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open the process-wide SQLite connection.

    - WAL journal for fewer writer blocks
    - NORMAL synchronous for performance
    - check_same_thread off: the connection is shared by request threads,
      callers serialize access (see RecordsRepo)
    """
    conn = sqlite3.connect(
        _resolve_path(db_path),
        timeout=timeout or 30.0,
        check_same_thread=False,
    )
    conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn
