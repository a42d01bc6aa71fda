"""
SQLite database integration and simple migration system.

The ``Database`` class owns the path of the SQLite file and hands out
short‑lived connections.  One instance is created per application and
kept on ``app.state``; request handlers receive it through a FastAPI
dependency so tests can substitute their own.

Every query opens its own connection inside the threadpool, so the
event loop never blocks on SQLite.  SQLite itself serializes writes.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, TypeVar

from fastapi.concurrency import run_in_threadpool

T = TypeVar("T")

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        -- Foreign keys are declared for documentation only.  The
        -- ``foreign_keys`` pragma stays off, so children may be inserted
        -- for parents that do not exist.
        CREATE TABLE IF NOT EXISTS users (
            id TEXT PRIMARY KEY,
            full_name TEXT NOT NULL,
            email TEXT UNIQUE,
            phone TEXT,
            gender TEXT,
            address TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS events (
            id TEXT PRIMARY KEY,
            user_id TEXT NOT NULL,
            event_type TEXT NOT NULL,
            event_date TEXT,
            event_time TEXT,
            guest_count INTEGER,
            budget REAL,
            venue TEXT,
            catering TEXT,
            decorations TEXT,
            photography TEXT,
            music TEXT,
            additional_notes TEXT,
            status TEXT NOT NULL DEFAULT 'pending',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );

        CREATE TABLE IF NOT EXISTS files (
            id TEXT PRIMARY KEY,
            event_id TEXT NOT NULL,
            user_id TEXT NOT NULL,
            file_name TEXT NOT NULL,
            file_type TEXT,
            file_path TEXT,
            file_size INTEGER,
            uploaded_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(event_id) REFERENCES events(id),
            FOREIGN KEY(user_id) REFERENCES users(id)
        );
        """,
    ),
    # Migration 2: indices for the per-owner listings and cascades
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_events_user_id ON events(user_id);
        CREATE INDEX IF NOT EXISTS idx_files_event_id ON files(event_id);
        CREATE INDEX IF NOT EXISTS idx_files_user_id ON files(user_id);
        """,
    ),
]


class Database:
    """Access to a single SQLite database file.

    The synchronous ``get_connection``/``get_cursor`` pair is used for
    migrations and inside ``transaction`` callbacks; request handlers
    use the awaitable ``fetch_*``/``execute``/``transaction`` helpers.
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be accessed
        by name.  No type detection is enabled; timestamps come back as
        the strings SQLite stored.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on success and always close the connection.

        If the body raises, the commit is skipped and closing the
        connection discards the open transaction.
        """
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    # ------------------------------------------------------------------
    # Synchronous primitives, executed in the threadpool
    # ------------------------------------------------------------------
    def _fetch_one(self, sql: str, params: Sequence[Any]) -> Optional[Dict[str, Any]]:
        with self.get_cursor() as cursor:
            row = cursor.execute(sql, tuple(params)).fetchone()
            return dict(row) if row else None

    def _fetch_all(self, sql: str, params: Sequence[Any]) -> List[Dict[str, Any]]:
        with self.get_cursor() as cursor:
            return [dict(row) for row in cursor.execute(sql, tuple(params)).fetchall()]

    def _execute(self, sql: str, params: Sequence[Any]) -> int:
        with self.get_cursor() as cursor:
            cursor.execute(sql, tuple(params))
            return cursor.rowcount

    def _transaction(self, func: Callable[[sqlite3.Cursor], T]) -> T:
        with self.get_cursor() as cursor:
            return func(cursor)

    # ------------------------------------------------------------------
    # Awaitable API
    # ------------------------------------------------------------------
    async def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        return await run_in_threadpool(self._fetch_one, sql, params)

    async def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        return await run_in_threadpool(self._fetch_all, sql, params)

    async def fetch_value(self, sql: str, params: Sequence[Any] = ()) -> Any:
        """Return the first column of the first row, or ``None``."""
        row = await self.fetch_one(sql, params)
        if row is None:
            return None
        return next(iter(row.values()))

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Execute a write statement and return the affected row count."""
        return await run_in_threadpool(self._execute, sql, params)

    async def transaction(self, func: Callable[[sqlite3.Cursor], T]) -> T:
        """Run ``func(cursor)`` inside one transaction.

        The transaction is committed when ``func`` returns and rolled
        back when it raises; the exception propagates to the caller.
        """
        return await run_in_threadpool(self._transaction, func)

    def init_db(self) -> None:
        """Create the database file if needed and apply pending migrations.

        If you add a new migration, append it to ``MIGRATIONS`` with an
        incremented version number.
        """
        with self.get_cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying migration %s to %s", version, self.path)
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
