"""
Service layer for dashboard statistics.

The overview consists of three independent ``COUNT(*)`` queries.  They
run concurrently, each on its own connection, and are joined before the
result is returned.
"""

from __future__ import annotations

import asyncio

from ..core.db import Database
from ..schemas.common import StatisticsRead


class StatisticsService:
    """Aggregated counts across users, events and files."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def overview(self) -> StatisticsRead:
        users, events, files = await asyncio.gather(
            self.db.fetch_value("SELECT COUNT(*) FROM users"),
            self.db.fetch_value("SELECT COUNT(*) FROM events"),
            self.db.fetch_value("SELECT COUNT(*) FROM files"),
        )
        return StatisticsRead(
            total_users=users or 0,
            total_events=events or 0,
            total_files=files or 0,
        )
