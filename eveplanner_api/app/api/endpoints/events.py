"""
Event endpoints.

Events are created for a ``userId`` that is stored as given; the owner
is not looked up.  Updates replace the whole record, including the
status.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.common import MutationResult
from ...schemas.event import EventCreate, EventCreated, EventRead, EventUpdate
from ...services.event_service import EventService
from ..deps import get_event_service

router = APIRouter()


@router.post("", response_model=EventCreated, status_code=status.HTTP_201_CREATED)
async def create_event(
    event: EventCreate,
    service: EventService = Depends(get_event_service),
) -> EventCreated:
    try:
        event_id = await service.create_event(event)
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return EventCreated(message="Event created successfully", event_id=event_id)


@router.get("", response_model=List[EventRead])
async def list_events(service: EventService = Depends(get_event_service)) -> List[EventRead]:
    try:
        return await service.list_events()
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.get("/{event_id}", response_model=EventRead)
async def get_event(event_id: str, service: EventService = Depends(get_event_service)) -> EventRead:
    """Retrieve a single event by its ID.  Raises 404 if the event is not found."""
    try:
        return await service.get_event(event_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.put("/{event_id}", response_model=MutationResult)
async def update_event(
    event_id: str,
    event: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> MutationResult:
    """Replace an event's details and status.

    Omitted optional fields are cleared and an omitted ``status`` resets
    the event to ``pending``.
    """
    try:
        await service.update_event(event_id, event)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return MutationResult(message="Event updated successfully")


@router.delete("/{event_id}", response_model=MutationResult)
async def delete_event(event_id: str, service: EventService = Depends(get_event_service)) -> MutationResult:
    """Delete an event together with the files uploaded under it."""
    try:
        await service.delete_event(event_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return MutationResult(message="Event deleted successfully")
