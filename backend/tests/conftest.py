"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import uuid
from datetime import datetime, timezone, timedelta
from unittest.mock import AsyncMock

import jwt  # PyJWT
import pytest
from bson import ObjectId

from api.dependencies import reset_container
from shared.config import Settings
from shared.models import AuthenticatedUser, UserRole
from modules.auth.service import AuthService
from modules.users.models import UserRecord


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known signing secret and no .env lookup."""
    return Settings(_env_file=None, jwt_secret=TEST_JWT_SECRET)


@pytest.fixture
def make_token():
    """
    Factory for signed session tokens.

    Usage:
        token = make_token("someone@example.com", expired=True)
    """

    def _make(
        email: str = "member@example.com",
        expired: bool = False,
        secret: str = TEST_JWT_SECRET,
        **overrides,
    ) -> str:
        now = datetime.now(timezone.utc)
        exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
        payload = {
            "sub": email,
            "name": "Test User",
            "email_verified": True,
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
            "jti": uuid.uuid4().hex,
        }
        payload.update(overrides)
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make


@pytest.fixture
def make_user_record():
    """Factory for user directory records."""

    def _make(email: str = "member@example.com", role: UserRole = UserRole.MEMBER) -> UserRecord:
        return UserRecord(
            id=str(ObjectId()),
            email=email,
            name="Test User",
            email_verified=True,
            role=role,
            created_at=datetime.now(timezone.utc),
        )

    return _make


@pytest.fixture
def user_directory() -> AsyncMock:
    """User directory with no records; tests set get_user_by_email as needed."""
    directory = AsyncMock()
    directory.get_user_by_email.return_value = None
    return directory


@pytest.fixture
def auth_service(test_settings: Settings, user_directory: AsyncMock) -> AuthService:
    """A real auth service over the mocked directory, without revocation storage."""
    return AuthService(settings=test_settings, users=user_directory)


@pytest.fixture
def member() -> AuthenticatedUser:
    return AuthenticatedUser(email="member@example.com", name="Test User", email_verified=True)


@pytest.fixture
def admin() -> AuthenticatedUser:
    return AuthenticatedUser(email="admin@example.com", name="Admin", email_verified=True)

