from __future__ import annotations

import sqlite3
import threading
from datetime import datetime, timezone
from typing import List, Optional

from models.github_record import GithubProfileData, GithubRecord


_COLUMNS = "id, resident, revenue, detail, house, timestamp"


def _row_to_record(row) -> GithubRecord:
    return GithubRecord(
        id=int(row[0]),
        resident=row[1],
        revenue=int(row[2]),
        detail=row[3],
        house=row[4],
        timestamp=datetime.fromisoformat(row[5]),
    )


class RecordsRepo:
    """Append-only store of scrape results. No update or delete."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._lock = threading.Lock()

    def save(self, data: GithubProfileData) -> GithubRecord:
        """Insert one record; assigns the storage id and creation timestamp."""
        timestamp = datetime.now(timezone.utc)
        sql = (
            "INSERT INTO github_data (resident, revenue, detail, house, timestamp) "
            "VALUES (?, ?, ?, ?, ?);"
        )
        with self._lock:
            cur = self.conn.cursor()
            cur.execute(sql, (
                data.resident, int(data.revenue), data.detail, data.house,
                timestamp.isoformat(timespec="microseconds"),
            ))
            self.conn.commit()
            record_id = int(cur.lastrowid)
        return GithubRecord(id=record_id, timestamp=timestamp, **data.model_dump())

    def list_all(self, limit: Optional[int] = None) -> List[GithubRecord]:
        """All records, newest first."""
        sql = f"SELECT {_COLUMNS} FROM github_data ORDER BY timestamp DESC, id DESC"
        params: tuple = ()
        if limit is not None:
            sql += " LIMIT ?"
            params = (int(limit),)
        with self._lock:
            cur = self.conn.cursor()
            cur.execute(sql, params)
            rows = cur.fetchall()
        return [_row_to_record(r) for r in rows]
