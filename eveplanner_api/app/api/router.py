"""
Top‑level API router.

Aggregates the resource routers.  The users router also serves
``/users/{user_id}/events``; file routes are split between
``/events/{event_id}/files`` and ``/files/{file_id}``, so the files
router carries full paths and is included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import events, files, system, users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(files.router, tags=["files"])
router.include_router(system.router, tags=["system"])
