"""
Local filesystem storage for uploaded file bytes.

Each File record points at one object in the upload directory, named
``<file id><original extension>``.  Records store that name relative to
the upload directory, so the directory can be moved or reached through
another path without losing track of its objects.  Writes and deletions
here are not part of any database transaction; callers pair them with a
database statement and undo the disk side on failure where they can.
"""

import logging
import os
from typing import BinaryIO, Iterable, List, Optional

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

# Longer extensions (dot included) are dropped from the stored name.
MAX_EXTENSION_LENGTH = 16


class UploadTooLarge(Exception):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"File exceeds the maximum upload size of {limit} bytes")
        self.limit = limit


class UploadStorage:
    def __init__(self, root: str) -> None:
        self.root = root

    def ensure_root(self) -> None:
        os.makedirs(self.root, exist_ok=True)

    def name_for(self, file_id: str, original_name: Optional[str]) -> str:
        """Return the stored name for a new object.

        Only the extension of the client supplied name is used, so the
        name cannot steer the path outside ``root``.
        """
        _, ext = os.path.splitext(os.path.basename(original_name or ""))
        if len(ext) > MAX_EXTENSION_LENGTH:
            ext = ""
        return f"{file_id}{ext}"

    def resolve(self, stored: Optional[str]) -> Optional[str]:
        """Map a stored name to a path on disk.

        Absolute values, written by earlier versions, are used while they
        still exist; otherwise their base name is looked up in ``root``.
        """
        if not stored:
            return None
        if os.path.isabs(stored):
            if os.path.isfile(stored):
                return stored
            stored = os.path.basename(stored)
        return os.path.join(self.root, stored)

    def write(self, source: BinaryIO, stored: str, max_size: int = 0) -> int:
        """Copy ``source`` to the object ``stored`` and return the byte count.

        A ``max_size`` of zero disables the limit.  On any failure the
        partially written object is removed before the error propagates.
        """
        size = 0
        try:
            with open(self.resolve(stored), "wb") as out:
                while True:
                    chunk = source.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if max_size and size > max_size:
                        raise UploadTooLarge(max_size)
                    out.write(chunk)
        except Exception:
            self.discard([stored])
            raise
        return size

    def exists(self, stored: Optional[str]) -> bool:
        path = self.resolve(stored)
        return path is not None and os.path.isfile(path)

    def remove(self, stored: Optional[str]) -> bool:
        """Delete the object if it exists.  Returns whether anything was removed."""
        if not self.exists(stored):
            return False
        os.remove(self.resolve(stored))
        return True

    def discard(self, names: Iterable[Optional[str]]) -> int:
        """Best‑effort removal of several objects.

        Failures are logged and skipped.  Returns the number of objects
        actually removed.
        """
        removed = 0
        for stored in names:
            try:
                if self.remove(stored):
                    removed += 1
            except OSError as exc:
                logger.error("Could not remove stored file %s: %s", stored, exc)
        return removed

    def list_objects(self) -> List[str]:
        """Return the names of all regular files in ``root``."""
        if not os.path.isdir(self.root):
            return []
        return [entry.name for entry in os.scandir(self.root) if entry.is_file()]
