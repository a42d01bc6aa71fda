"""
Business logic for events.

Events belong to a user through ``user_id``, which is not validated on
insert: an event may be created for a user id that does not exist.
"""

import logging
import sqlite3
import uuid
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from ..core.db import Database
from ..schemas.event import EventCreate, EventRead, EventStatus, EventUpdate
from .storage import UploadStorage

logger = logging.getLogger(__name__)

EVENT_COLUMNS = (
    "id, user_id, event_type, event_date, event_time, guest_count, budget, venue, "
    "catering, decorations, photography, music, additional_notes, status, created_at"
)


class EventService:
    """Queries over the ``events`` table."""

    def __init__(self, db: Database, storage: Optional[UploadStorage] = None) -> None:
        self.db = db
        self.storage = storage

    async def create_event(self, data: EventCreate) -> str:
        """Insert a pending event and return its identifier."""
        event_id = str(uuid.uuid4())
        await self.db.execute(
            """
            INSERT INTO events (
                id, user_id, event_type, event_date, event_time, guest_count, budget,
                venue, catering, decorations, photography, music, additional_notes, status
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                event_id,
                data.user_id,
                data.event_type,
                data.event_date,
                data.event_time,
                data.guest_count,
                data.budget,
                data.venue,
                data.catering,
                data.decorations,
                data.photography,
                data.music,
                data.additional_notes,
                EventStatus.PENDING.value,
            ),
        )
        logger.info("User %s created %s event %s", data.user_id, data.event_type, event_id)
        return event_id

    async def list_events(self) -> List[EventRead]:
        rows = await self.db.fetch_all(f"SELECT {EVENT_COLUMNS} FROM events ORDER BY created_at, id")
        return [EventRead.model_validate(row) for row in rows]

    async def list_user_events(self, user_id: str) -> List[EventRead]:
        """Events owned by ``user_id``; empty when the user has none or is unknown."""
        rows = await self.db.fetch_all(
            f"SELECT {EVENT_COLUMNS} FROM events WHERE user_id = ? ORDER BY created_at, id",
            (user_id,),
        )
        return [EventRead.model_validate(row) for row in rows]

    async def get_event(self, event_id: str) -> EventRead:
        row = await self.db.fetch_one(f"SELECT {EVENT_COLUMNS} FROM events WHERE id = ?", (event_id,))
        if not row:
            raise ValueError("Event not found")
        return EventRead.model_validate(row)

    async def update_event(self, event_id: str, data: EventUpdate) -> None:
        """Replace the planning details and status of an event.

        Raises ``ValueError`` if the event does not exist.
        """
        count = await self.db.execute(
            """
            UPDATE events
            SET event_type = ?, event_date = ?, event_time = ?, guest_count = ?, budget = ?,
                venue = ?, catering = ?, decorations = ?, photography = ?, music = ?,
                additional_notes = ?, status = ?
            WHERE id = ?
            """,
            (
                data.event_type,
                data.event_date,
                data.event_time,
                data.guest_count,
                data.budget,
                data.venue,
                data.catering,
                data.decorations,
                data.photography,
                data.music,
                data.additional_notes,
                data.status.value,
                event_id,
            ),
        )
        if count == 0:
            raise ValueError("Event not found")
        logger.info("Updated event %s (status %s)", event_id, data.status.value)

    async def delete_event(self, event_id: str) -> None:
        """Delete an event and the files uploaded under it."""

        def cascade(cursor: sqlite3.Cursor) -> List[str]:
            paths = [
                row["file_path"]
                for row in cursor.execute(
                    "SELECT file_path FROM files WHERE event_id = ?", (event_id,)
                ).fetchall()
            ]
            cursor.execute("DELETE FROM files WHERE event_id = ?", (event_id,))
            cursor.execute("DELETE FROM events WHERE id = ?", (event_id,))
            if cursor.rowcount == 0:
                raise ValueError("Event not found")
            return paths

        paths = await self.db.transaction(cascade)
        if self.storage and paths:
            await run_in_threadpool(self.storage.discard, paths)
        logger.info("Deleted event %s with %d files", event_id, len(paths))
