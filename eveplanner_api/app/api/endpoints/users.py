"""
User endpoints.

CRUD over users created from the signup form, plus the listing of a
user's events.  Store errors on writes (for example a duplicate e‑mail)
are returned as 400 with the SQLite message unchanged.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.common import MutationResult
from ...schemas.event import EventRead
from ...schemas.user import UserCreate, UserCreated, UserRead, UserUpdate
from ...services.event_service import EventService
from ...services.user_service import UserService
from ..deps import get_event_service, get_user_service

router = APIRouter()


@router.post("", response_model=UserCreated, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserCreated:
    """Register a new user and return the generated ``userId``."""
    try:
        user_id = await service.create_user(user)
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return UserCreated(message="User created successfully", user_id=user_id)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    try:
        return await service.list_users()
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    try:
        return await service.get_user(user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.put("/{user_id}", response_model=MutationResult)
async def update_user(
    user_id: str,
    user: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> MutationResult:
    """Replace a user's profile.

    All profile fields are written; anything omitted becomes null.
    """
    try:
        await service.update_user(user_id, user)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return MutationResult(message="User updated successfully")


@router.delete("/{user_id}", response_model=MutationResult)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> MutationResult:
    """Delete a user.

    The user's events and their files (records and stored objects) are
    deleted as well.
    """
    try:
        await service.delete_user(user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return MutationResult(message="User deleted successfully")


@router.get("/{user_id}/events", response_model=List[EventRead])
async def list_user_events(
    user_id: str,
    service: EventService = Depends(get_event_service),
) -> List[EventRead]:
    """List the events owned by a user.

    An unknown user simply has no events; this route never answers 404.
    """
    try:
        return await service.list_user_events(user_id)
    except sqlite3.Error as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
