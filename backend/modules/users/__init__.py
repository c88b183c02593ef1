"""
Users module.

The user directory: profile upsert on first contact, role management,
and the lookups the authorizer relies on.

Public API:
- IUserDirectory, IUserService: Interfaces
- UserRecord: Stored user
- UserNotFoundError
"""

from .interfaces import IUserDirectory, IUserService
from .models import (
    UserRecord,
    ProfileUpdateRequest,
    UpsertUserResponse,
    RoleUpdateRequest,
    RoleResponse,
)
from .exceptions import UserNotFoundError

__all__ = [
    # Interfaces
    "IUserDirectory",
    "IUserService",
    # Models
    "UserRecord",
    "ProfileUpdateRequest",
    "UpsertUserResponse",
    "RoleUpdateRequest",
    "RoleResponse",
    # Exceptions
    "UserNotFoundError",
]
