"""
Pydantic models for uploaded file metadata.

The storage path is never part of a response.
"""

from datetime import datetime
from typing import Optional

from .common import CamelModel, MutationResult


class FileRead(CamelModel):
    id: str
    file_name: str
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    uploaded_at: Optional[datetime] = None


class FileUploaded(MutationResult):
    file_id: str
    file_name: str
