"""
User repository for database access.

Encapsulates all queries against the ``users`` collection.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import ASCENDING

from shared.models import UserRole
from shared.repository import BaseRepository, parse_object_id
from .models import UserRecord


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for the user directory.

    Note: This repository does NOT perform authorization checks.
    The service layer and API gates are responsible for that.
    """

    collection_name = "users"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("email", ASCENDING)], unique=True)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        doc = self._collection.find_one({"email": email})
        return self._map_to_user(doc) if doc else None

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        doc = self._collection.find_one({"_id": parse_object_id(user_id)})
        return self._map_to_user(doc) if doc else None

    def list_users(self) -> list[UserRecord]:
        cursor = self._collection.find().sort("created_at", ASCENDING)
        return [self._map_to_user(doc) for doc in cursor]

    def upsert_by_email(
        self,
        email: str,
        profile: dict[str, Any],
        last_seen_ip: Optional[str],
    ) -> bool:
        """
        Insert the full record on first contact, otherwise refresh only
        the last-seen fields.

        Args:
            email: Natural key of the user.
            profile: Fields written only when the record is created
                (name, image, email_verified).
            last_seen_ip: Network origin of the current request.

        Returns:
            True if a new record was inserted.
        """
        now = datetime.now(timezone.utc)
        insert_only = {
            **profile,
            "email": email,
            "role": UserRole.MEMBER.value,
            "created_at": now,
        }
        result = self._collection.update_one(
            {"email": email},
            {
                "$set": {"last_seen_ip": last_seen_ip, "last_seen_at": now},
                "$setOnInsert": insert_only,
            },
            upsert=True,
        )
        return result.upserted_id is not None

    def set_role(self, user_id: str, role: UserRole) -> bool:
        """
        Overwrite a user's role.

        Returns:
            True if a record matched the identifier.
        """
        result = self._collection.update_one(
            {"_id": parse_object_id(user_id)},
            {"$set": {"role": role.value}},
        )
        return result.matched_count > 0

    def _map_to_user(self, doc: dict[str, Any]) -> UserRecord:
        """Map a user document to UserRecord."""
        return UserRecord(
            id=str(doc["_id"]),
            email=doc["email"],
            name=doc.get("name"),
            email_verified=doc.get("email_verified", False),
            role=UserRole(doc.get("role", UserRole.MEMBER.value)),
            image=doc.get("image"),
            last_seen_ip=doc.get("last_seen_ip"),
            created_at=doc.get("created_at"),
            last_seen_at=doc.get("last_seen_at"),
        )
