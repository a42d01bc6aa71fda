"""
Pydantic models for user data.

Users are created from the signup form.  Only ``fullName`` is
required; ``email`` is optional but unique when present (enforced by
the database, not here).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel, MutationResult


class UserBase(CamelModel):
    full_name: str = Field(..., min_length=1, examples=["Jane D."])
    email: Optional[str] = Field(None, examples=["jane@example.com"])
    phone: Optional[str] = Field(None, examples=["+1 555 0100"])
    gender: Optional[str] = None
    address: Optional[str] = None


class UserCreate(UserBase):
    """Schema for registering a user."""
    pass


class UserUpdate(UserBase):
    """Schema for replacing a user's profile.

    Updates are full‑record: fields left out are stored as null.
    """
    pass


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str
    created_at: Optional[datetime] = None


class UserCreated(MutationResult):
    user_id: str
