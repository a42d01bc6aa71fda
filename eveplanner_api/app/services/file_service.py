"""
Business logic for files uploaded under events.

An upload is two sequential steps without a shared transaction: the
bytes are written to the upload directory, then a row is inserted in
``files``.  If the insert fails the object just written is removed
again.  Deletion runs the other way round (object first, then row).

``reconcile`` repairs what a crash between those steps leaves behind:
stored objects without a row are removed, rows without an object are
reported.
"""

import logging
import os
import uuid
from typing import List, Optional, Tuple

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from ..core.db import Database
from ..schemas.file import FileRead
from .storage import UploadStorage

logger = logging.getLogger(__name__)


class FileService:
    def __init__(self, db: Database, storage: UploadStorage, max_upload_size: int = 0) -> None:
        self.db = db
        self.storage = storage
        self.max_upload_size = max_upload_size

    async def upload_file(self, event_id: str, upload: UploadFile, user_id: Optional[str]) -> str:
        """Store ``upload`` for ``event_id`` and return the new file identifier.

        Raises ``UploadTooLarge`` or ``OSError`` before any row is
        written, and re‑raises ``sqlite3.Error`` from the insert after
        removing the stored object.
        """
        file_id = str(uuid.uuid4())
        stored = self.storage.name_for(file_id, upload.filename)
        size = await run_in_threadpool(self.storage.write, upload.file, stored, self.max_upload_size)
        try:
            await self.db.execute(
                """
                INSERT INTO files (id, event_id, user_id, file_name, file_type, file_path, file_size)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (file_id, event_id, user_id, upload.filename, upload.content_type, stored, size),
            )
        except Exception:
            logger.error("Saving record for %s failed, removing stored object %s", upload.filename, stored)
            await run_in_threadpool(self.storage.discard, [stored])
            raise
        logger.info("Stored %s (%d bytes) for event %s as %s", upload.filename, size, event_id, file_id)
        return file_id

    async def list_event_files(self, event_id: str) -> List[FileRead]:
        rows = await self.db.fetch_all(
            "SELECT id, file_name, file_type, file_size, uploaded_at FROM files "
            "WHERE event_id = ? ORDER BY uploaded_at, id",
            (event_id,),
        )
        return [FileRead.model_validate(row) for row in rows]

    async def resolve_download(self, file_id: str) -> Tuple[str, str, Optional[str]]:
        """Return ``(path, original name, MIME type)`` for a stored file.

        Raises ``ValueError`` when there is no record, or when the record
        points at an object that is no longer on disk.
        """
        row = await self.db.fetch_one(
            "SELECT file_name, file_type, file_path FROM files WHERE id = ?", (file_id,)
        )
        if not row:
            raise ValueError("File not found")
        if not self.storage.exists(row["file_path"]):
            logger.warning("File %s has no stored object at %s", file_id, row["file_path"])
            raise ValueError("File does not exist on server")
        return self.storage.resolve(row["file_path"]), row["file_name"], row["file_type"]

    async def delete_file(self, file_id: str) -> None:
        """Remove the stored object, then the record.

        If the record deletion fails after the object is gone, the row
        remains and downloads of it answer 404 until ``reconcile`` or
        another delete runs.
        """
        row = await self.db.fetch_one("SELECT file_path FROM files WHERE id = ?", (file_id,))
        if not row:
            raise ValueError("File not found")
        await run_in_threadpool(self.storage.remove, row["file_path"])
        await self.db.execute("DELETE FROM files WHERE id = ?", (file_id,))
        logger.info("Deleted file %s", file_id)

    async def reconcile(self) -> Tuple[int, int]:
        """Remove unreferenced stored objects and report dangling records.

        Returns ``(removed objects, dangling records)``.
        """
        rows = await self.db.fetch_all("SELECT id, file_path FROM files")
        # Objects are matched to records by file id, the stem of the stored name.
        referenced = {row["id"] for row in rows}
        objects = await run_in_threadpool(self.storage.list_objects)
        orphans = [name for name in objects if os.path.splitext(name)[0] not in referenced]
        removed = await run_in_threadpool(self.storage.discard, orphans)

        dangling = [row["id"] for row in rows if not self.storage.exists(row["file_path"])]
        for file_id in dangling:
            logger.warning("File record %s points at a missing stored object", file_id)
        if removed or dangling:
            logger.info(
                "Upload reconciliation removed %d orphaned objects, found %d dangling records",
                removed,
                len(dangling),
            )
        return removed, len(dangling)
