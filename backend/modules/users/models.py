"""
Users module data models.

These models define the user directory records and the request/response
shapes of the user endpoints.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from shared.models import UserRole


class UserRecord(BaseModel):
    """A user as stored in the user directory."""

    id: str = Field(..., description="User ID (ObjectId)")
    email: EmailStr = Field(..., description="Email address (natural key)")
    name: Optional[str] = Field(None, description="Display name")
    email_verified: bool = Field(default=False, description="Verified by the identity provider")
    role: UserRole = Field(default=UserRole.MEMBER, description="Directory role")
    image: Optional[str] = Field(None, description="Profile image URL")
    last_seen_ip: Optional[str] = Field(None, description="Last-seen network origin")
    created_at: Optional[datetime] = Field(None, description="First contact")
    last_seen_at: Optional[datetime] = Field(None, description="Last authenticated contact")


class ProfileUpdateRequest(BaseModel):
    """Profile fields supplied by the caller when upserting their record."""

    name: Optional[str] = Field(None, max_length=200)
    image: Optional[str] = Field(None, max_length=2000)
    email_verified: bool = False


class UpsertUserResponse(BaseModel):
    """Result of an upsert-by-email."""

    created: bool = Field(..., description="True when a new record was inserted")
    user: UserRecord


class RoleUpdateRequest(BaseModel):
    """Request to change a user's role."""

    role: UserRole


class RoleResponse(BaseModel):
    """A user's current role."""

    email: EmailStr
    role: UserRole
