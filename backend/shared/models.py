"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class UserRole(str, Enum):
    """Roles a user can hold, lowest privilege first."""

    MEMBER = "member"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _ROLE_RANKS[self]

    def satisfies(self, required: "UserRole") -> bool:
        """Whether this role meets or exceeds the required role."""
        return self.rank >= required.rank


_ROLE_RANKS = {
    UserRole.MEMBER: 0,
    UserRole.ADMIN: 1,
}


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated purely from the session token claims and made available
    to route handlers via dependency injection. The role is not part of
    the token; it is looked up by the authorizer when a route needs it.
    """

    email: EmailStr = Field(..., description="Subject identity (email)")
    name: Optional[str] = Field(None, description="Display name")
    email_verified: bool = Field(default=False, description="Whether email is verified")

    token_id: Optional[str] = Field(None, description="Session token identifier (jti)")
    issued_at: Optional[datetime] = Field(None, description="Token issue time")
    expires_at: Optional[datetime] = Field(None, description="Token expiry time")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class DeleteResponse(BaseModel):
    """Response for delete-by-identity operations."""

    deleted: bool = True
    id: str
