"""
Pydantic models for event data.

``EventFields`` holds the planning details shared by every event
schema.  ``EventCreate`` adds the owning user, ``EventUpdate`` the
status, and ``EventRead`` the stored identity and timestamps.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .common import CamelModel, MutationResult


class EventStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class EventFields(CamelModel):
    event_type: str = Field(..., min_length=1, examples=["Wedding"])
    # Date and time are kept as the strings the booking form sends.
    event_date: Optional[str] = Field(None, examples=["2025-06-14"])
    event_time: Optional[str] = Field(None, examples=["18:30"])
    guest_count: Optional[int] = Field(None, ge=0, examples=[120])
    budget: Optional[float] = Field(None, ge=0, examples=[15000.0])
    venue: Optional[str] = None
    catering: Optional[str] = None
    decorations: Optional[str] = None
    photography: Optional[str] = None
    music: Optional[str] = None
    additional_notes: Optional[str] = None


class EventCreate(EventFields):
    """Schema for creating an event.

    ``user_id`` is not checked against the users table.
    """

    user_id: str = Field(..., min_length=1)


class EventUpdate(EventFields):
    """Schema for a full‑record event update.

    Every planning field is replaced; an omitted ``status`` resets the
    event to ``pending``.  The owner and creation time never change.
    """

    status: EventStatus = EventStatus.PENDING


class EventRead(EventFields):
    id: str
    user_id: str
    status: EventStatus = EventStatus.PENDING
    created_at: Optional[datetime] = None


class EventCreated(MutationResult):
    event_id: str
