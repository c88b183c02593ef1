"""
Users module interfaces.

IUserDirectory is the narrow read-only view the auth module's authorizer
depends on. IUserService is the full contract used by the user routes.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserRole
from .models import UserRecord, UpsertUserResponse, ProfileUpdateRequest


@runtime_checkable
class IUserDirectory(Protocol):
    """Read-only lookup of user records."""

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a user record by email.

        Returns:
            UserRecord if found, None otherwise
        """
        ...


@runtime_checkable
class IUserService(IUserDirectory, Protocol):
    """Interface for user profile and role management."""

    async def get_profile(self, email: str) -> UserRecord:
        """
        Get the caller's own record.

        Raises:
            UserNotFoundError: If no record exists for the email
        """
        ...

    async def list_users(self) -> list[UserRecord]:
        """List every user record, oldest first."""
        ...

    async def upsert_profile(
        self,
        email: str,
        profile: ProfileUpdateRequest,
        origin: Optional[str] = None,
    ) -> UpsertUserResponse:
        """
        Upsert a user by email.

        On first contact the full record is inserted with the member role.
        Afterwards only the last-seen origin and time are updated.
        """
        ...

    async def update_role(self, user_id: str, role: UserRole) -> UserRecord:
        """
        Overwrite a user's role.

        Raises:
            UserNotFoundError: If the user doesn't exist
            InvalidIdentifierError: If user_id is malformed
        """
        ...
