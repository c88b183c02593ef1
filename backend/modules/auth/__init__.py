"""
Authentication module.

Handles session token issuance/validation, logout revocation and
role-based authorization against the user directory.

Public API:
- IAuthService: Interface for auth operations
- SessionClaims, LoginRequest, IssuedToken: Token models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import SessionClaims, LoginRequest, IssuedToken, LoginResponse, LogoutResponse
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    RevokedTokenError,
    AuthNotConfiguredError,
    UserNotRegisteredError,
    InsufficientPermissionsError,
    ImpersonationError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "SessionClaims",
    "LoginRequest",
    "IssuedToken",
    "LoginResponse",
    "LogoutResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "RevokedTokenError",
    "AuthNotConfiguredError",
    "UserNotRegisteredError",
    "InsufficientPermissionsError",
    "ImpersonationError",
]
