"""SQLite-backed store for cached watch records."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from persistence.models import CacheStats, RecordRow


_SCHEMA = """
PRAGMA journal_mode=WAL;

CREATE TABLE IF NOT EXISTS records (
    id TEXT PRIMARY KEY,
    serialized_data TEXT NOT NULL,
    title TEXT NOT NULL,
    finished BOOLEAN NOT NULL,
    episode INTEGER,
    time_at_episode INTEGER,
    season INTEGER,
    logged_time INTEGER,
    note TEXT,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_records_title ON records(title, season);
CREATE INDEX IF NOT EXISTS idx_records_created_at ON records(created_at);
"""


class SqliteStore:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize()

    @property
    def path(self) -> Path:
        return self._path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self._path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _initialize(self) -> None:
        with self._connect() as conn:
            conn.executescript(_SCHEMA)

    def get_serialized(self, record_id: int) -> str | None:
        row = self._fetch_one(
            "SELECT serialized_data FROM records WHERE id = ?", (str(record_id),)
        )
        return row["serialized_data"] if row else None

    def upsert_record(self, row: RecordRow, serialized_data: str) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO records (
                    id, serialized_data, title, finished, episode, time_at_episode,
                    season, logged_time, note, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    str(row.id),
                    serialized_data,
                    row.title,
                    row.finished,
                    row.episode,
                    row.time_at_episode,
                    row.season,
                    row.logged_time,
                    row.note,
                    row.created_at.isoformat(),
                ),
            )

    def list_records(self, *, limit: int | None = None) -> list[RecordRow]:
        if limit is None:
            rows = self._fetch_all("SELECT * FROM records ORDER BY created_at, id")
        else:
            rows = self._fetch_all(
                "SELECT * FROM records ORDER BY created_at, id LIMIT ?", (limit,)
            )
        return [_row_to_record(row) for row in rows]

    def stats(self) -> CacheStats:
        row = self._fetch_one(
            """
            SELECT COUNT(*) AS records,
                   COALESCE(SUM(CASE WHEN finished THEN 1 ELSE 0 END), 0) AS finished,
                   COUNT(DISTINCT title) AS titles
              FROM records
            """
        )
        return CacheStats(records=row["records"], finished=row["finished"], titles=row["titles"])

    def clear(self) -> int:
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM records")
            return cur.rowcount

    def delete_older_than(self, cutoff: datetime) -> int:
        with self._connect() as conn:
            cur = conn.execute(
                "DELETE FROM records WHERE created_at < ?", (cutoff.isoformat(),)
            )
            return cur.rowcount

    def _fetch_one(self, query: str, params: tuple[object, ...] = ()) -> sqlite3.Row | None:
        with self._connect() as conn:
            cur = conn.execute(query, params)
            return cur.fetchone()

    def _fetch_all(self, query: str, params: tuple[object, ...] = ()) -> list[sqlite3.Row]:
        with self._connect() as conn:
            cur = conn.execute(query, params)
            return cur.fetchall()


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_record(row: sqlite3.Row) -> RecordRow:
    return RecordRow(
        id=int(row["id"]),
        title=row["title"],
        finished=bool(row["finished"]),
        episode=row["episode"],
        time_at_episode=row["time_at_episode"],
        season=row["season"],
        logged_time=row["logged_time"],
        note=row["note"],
        created_at=datetime.fromisoformat(row["created_at"]),
    )


__all__ = ["SqliteStore", "now_utc"]
