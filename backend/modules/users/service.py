"""
User service implementation.

Backs both the user endpoints and the authorizer's directory lookups.
"""

import logging
from typing import Optional

from shared.models import UserRole
from .interfaces import IUserService
from .models import UserRecord, UpsertUserResponse, ProfileUpdateRequest
from .repository import UserRepository
from .exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """User directory service over the users collection."""

    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self._repository.get_by_email(email)

    async def get_profile(self, email: str) -> UserRecord:
        user = self._repository.get_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def list_users(self) -> list[UserRecord]:
        return self._repository.list_users()

    async def upsert_profile(
        self,
        email: str,
        profile: ProfileUpdateRequest,
        origin: Optional[str] = None,
    ) -> UpsertUserResponse:
        created = self._repository.upsert_by_email(
            email,
            profile.model_dump(),
            last_seen_ip=origin,
        )
        if created:
            logger.info("Registered new user", extra={"user_email": email})

        user = self._repository.get_by_email(email)
        if user is None:
            # Only reachable if the record was removed between the two calls
            raise UserNotFoundError(email)
        return UpsertUserResponse(created=created, user=user)

    async def update_role(self, user_id: str, role: UserRole) -> UserRecord:
        if not self._repository.set_role(user_id, role):
            raise UserNotFoundError(user_id)

        logger.info("Changed role of user %s to %s", user_id, role.value)
        user = self._repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
