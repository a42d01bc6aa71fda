"""
File endpoints.

Uploads are multipart requests with the file in the ``file`` part and
the uploader in an optional ``userId`` form field.  Listing returns
metadata only; the storage path never leaves the server.
"""

import logging
import sqlite3
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import FileResponse

from ...schemas.common import MutationResult
from ...schemas.file import FileRead, FileUploaded
from ...services.file_service import FileService
from ...services.storage import UploadTooLarge
from ..deps import get_file_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/events/{event_id}/files",
    response_model=FileUploaded,
    status_code=status.HTTP_201_CREATED,
)
async def upload_file(
    event_id: str,
    file: Optional[UploadFile] = File(None),
    user_id: Optional[str] = Form(None, alias="userId"),
    service: FileService = Depends(get_file_service),
) -> FileUploaded:
    """Upload a file for an event.

    The file is written to disk first.  If the record cannot be saved
    (for example because ``userId`` is missing) the written file is
    deleted again and the store error is returned as 400.
    """
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")
    try:
        file_id = await service.upload_file(event_id, file, user_id)
    except UploadTooLarge as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except OSError as e:
        logger.error("Writing upload %s for event %s failed: %s", file.filename, event_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Could not store the uploaded file"
        ) from e
    finally:
        await file.close()
    return FileUploaded(message="File uploaded successfully", file_id=file_id, file_name=file.filename)


@router.get("/events/{event_id}/files", response_model=List[FileRead])
async def list_event_files(
    event_id: str,
    service: FileService = Depends(get_file_service),
) -> List[FileRead]:
    try:
        return await service.list_event_files(event_id)
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.get("/files/{file_id}/download")
async def download_file(file_id: str, service: FileService = Depends(get_file_service)) -> FileResponse:
    """Send the stored file under its original name."""
    try:
        path, file_name, file_type = await service.resolve_download(file_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
    return FileResponse(path, filename=file_name, media_type=file_type or "application/octet-stream")


@router.delete("/files/{file_id}", response_model=MutationResult)
async def delete_file(file_id: str, service: FileService = Depends(get_file_service)) -> MutationResult:
    try:
        await service.delete_file(file_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except (sqlite3.Error, OSError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return MutationResult(message="File deleted successfully")
