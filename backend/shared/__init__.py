"""
Shared infrastructure for the SurveyWallet backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB connection handle
- exceptions: Base exception classes
- observability: Logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import MongoDatabase, get_database, reset_database_cache
from .exceptions import (
    SurveyWalletError,
    NotFoundError,
    ValidationError,
    InvalidIdentifierError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, UserRole, DeleteResponse

__all__ = [
    "Settings",
    "get_settings",
    "MongoDatabase",
    "get_database",
    "reset_database_cache",
    "SurveyWalletError",
    "NotFoundError",
    "ValidationError",
    "InvalidIdentifierError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "UserRole",
    "DeleteResponse",
]
