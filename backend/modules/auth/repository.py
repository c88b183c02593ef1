"""
Revoked session token storage.

Holds the identifiers of tokens revoked at logout until their natural
expiry. A TTL index lets MongoDB purge entries once they can no longer
authenticate anyway.
"""

from datetime import datetime

from pymongo import ASCENDING

from shared.repository import BaseRepository


class RevokedTokenRepository(BaseRepository[str]):
    """Repository for the ``revoked_tokens`` collection."""

    collection_name = "revoked_tokens"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("jti", ASCENDING)], unique=True)
        self._collection.create_index([("expires_at", ASCENDING)], expireAfterSeconds=0)

    def revoke(self, token_id: str, expires_at: datetime) -> None:
        """Record a token identifier as revoked. Revoking twice is harmless."""
        self._collection.update_one(
            {"jti": token_id},
            {"$setOnInsert": {"jti": token_id, "expires_at": expires_at}},
            upsert=True,
        )

    def is_revoked(self, token_id: str) -> bool:
        return self._collection.find_one({"jti": token_id}, {"_id": 1}) is not None
