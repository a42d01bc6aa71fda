"""
Business logic for users.

Users are stored in the ``users`` table with UUID identifiers.  Deleting
a user also deletes the user's events and every file attached to them;
see ``UserService.delete_user``.
"""

import logging
import sqlite3
import uuid
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool

from ..core.db import Database
from ..schemas.user import UserCreate, UserRead, UserUpdate
from .storage import UploadStorage

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, full_name, email, phone, gender, address, created_at"


class UserService:
    """Queries over the ``users`` table."""

    def __init__(self, db: Database, storage: Optional[UploadStorage] = None) -> None:
        self.db = db
        self.storage = storage

    async def create_user(self, data: UserCreate) -> str:
        """Insert a user and return the generated identifier.

        A duplicate e‑mail raises ``sqlite3.IntegrityError``.
        """
        user_id = str(uuid.uuid4())
        await self.db.execute(
            "INSERT INTO users (id, full_name, email, phone, gender, address) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (user_id, data.full_name, data.email, data.phone, data.gender, data.address),
        )
        logger.info("Created user %s", user_id)
        return user_id

    async def list_users(self) -> List[UserRead]:
        rows = await self.db.fetch_all(f"SELECT {USER_COLUMNS} FROM users ORDER BY created_at, id")
        return [UserRead.model_validate(row) for row in rows]

    async def get_user(self, user_id: str) -> UserRead:
        """Return the user or raise ``ValueError`` if it does not exist."""
        row = await self.db.fetch_one(f"SELECT {USER_COLUMNS} FROM users WHERE id = ?", (user_id,))
        if not row:
            raise ValueError("User not found")
        return UserRead.model_validate(row)

    async def update_user(self, user_id: str, data: UserUpdate) -> None:
        """Replace every profile field of an existing user."""
        count = await self.db.execute(
            "UPDATE users SET full_name = ?, email = ?, phone = ?, gender = ?, address = ? "
            "WHERE id = ?",
            (data.full_name, data.email, data.phone, data.gender, data.address, user_id),
        )
        if count == 0:
            raise ValueError("User not found")
        logger.info("Updated user %s", user_id)

    async def delete_user(self, user_id: str) -> None:
        """Delete a user together with the user's events and files.

        File rows belonging to the user, or to any event the user owns,
        are removed in the same transaction as the user.  Their stored
        objects are unlinked afterwards on a best‑effort basis.
        """

        def cascade(cursor: sqlite3.Cursor) -> List[str]:
            owned = "user_id = ? OR event_id IN (SELECT id FROM events WHERE user_id = ?)"
            paths = [
                row["file_path"]
                for row in cursor.execute(
                    f"SELECT file_path FROM files WHERE {owned}", (user_id, user_id)
                ).fetchall()
            ]
            cursor.execute(f"DELETE FROM files WHERE {owned}", (user_id, user_id))
            cursor.execute("DELETE FROM events WHERE user_id = ?", (user_id,))
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            if cursor.rowcount == 0:
                # Rolls back the child deletions as well.
                raise ValueError("User not found")
            return paths

        paths = await self.db.transaction(cascade)
        removed = await run_in_threadpool(self.storage.discard, paths) if self.storage else 0
        logger.info("Deleted user %s (%d files, %d stored objects)", user_id, len(paths), removed)
