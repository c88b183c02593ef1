"""
Authentication module data models.

These models define the session token payload and the login/logout
request and response shapes.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, EmailStr


class SessionClaims(BaseModel):
    """
    Decoded session token payload.

    The subject is the caller's email address. The role is deliberately
    absent: it is read from the user directory on every authorization check.
    """

    sub: EmailStr = Field(..., description="Subject (email)")
    name: Optional[str] = Field(None, description="Display name")
    email_verified: bool = Field(default=False, description="Verified by identity provider")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
    jti: str = Field(..., description="Token identifier")


class LoginRequest(BaseModel):
    """
    Identity claims presented at login.

    These come from the external identity provider and are trusted
    as already verified.
    """

    email: EmailStr = Field(..., description="Verified email address")
    name: Optional[str] = Field(None, max_length=200, description="Display name")
    email_verified: bool = Field(default=False, description="Whether the provider verified the email")
    image: Optional[str] = Field(None, max_length=2000, description="Profile image URL")


class IssuedToken(BaseModel):
    """A freshly signed session token."""

    token: str
    token_id: str
    expires_at: datetime


class LoginResponse(BaseModel):
    """Response from the login endpoint. The token itself travels in the cookie."""

    success: bool = True
    email: EmailStr
    expires_at: datetime


class LogoutResponse(BaseModel):
    """Response from the logout endpoint."""

    success: bool = True
    revoked: bool = Field(..., description="Whether a live token was revoked server-side")
