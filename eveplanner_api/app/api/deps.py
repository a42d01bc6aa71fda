"""
FastAPI dependencies that hand out the application's store handles.

The ``Database`` and ``UploadStorage`` instances are created by
``create_app`` and kept on ``app.state``.  Tests replace them through
``app.dependency_overrides[get_db]`` or by building the app with their
own ``Settings``.
"""

from fastapi import Depends, Request

from ..core.db import Database
from ..services.event_service import EventService
from ..services.file_service import FileService
from ..services.statistics_service import StatisticsService
from ..services.storage import UploadStorage
from ..services.user_service import UserService


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_storage(request: Request) -> UploadStorage:
    return request.app.state.storage


def get_user_service(
    db: Database = Depends(get_db),
    storage: UploadStorage = Depends(get_storage),
) -> UserService:
    return UserService(db, storage)


def get_event_service(
    db: Database = Depends(get_db),
    storage: UploadStorage = Depends(get_storage),
) -> EventService:
    return EventService(db, storage)


def get_file_service(
    request: Request,
    db: Database = Depends(get_db),
    storage: UploadStorage = Depends(get_storage),
) -> FileService:
    return FileService(db, storage, request.app.state.settings.max_upload_size)


def get_statistics_service(db: Database = Depends(get_db)) -> StatisticsService:
    return StatisticsService(db)
