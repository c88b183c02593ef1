"""
MongoDB connection handle.

One client is opened per process at application startup and closed at
shutdown. Repositories receive the handle explicitly instead of reaching
for a global connection.
"""

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import get_settings

logger = logging.getLogger(__name__)


class MongoDatabase:
    """
    Shared-ownership handle around a MongoClient and its database.

    The client is created lazily on first access (or explicitly through
    connect()) and reused for every request until close() is called.
    """

    def __init__(self, uri: str, name: str, timeout_ms: int = 5000) -> None:
        self._uri = uri
        self._name = name
        self._timeout_ms = timeout_ms
        self._client: Optional[MongoClient] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    def connect(self) -> Database:
        """Open the client if needed and return the database."""
        if self._client is None:
            self._client = MongoClient(
                self._uri,
                serverSelectionTimeoutMS=self._timeout_ms,
                tz_aware=True,
            )
            logger.info("Opened MongoDB client for database %s", self._name)
        return self._client[self._name]

    @property
    def db(self) -> Database:
        return self.connect()

    def collection(self, name: str) -> Collection:
        """Get a collection from the database."""
        return self.db[name]

    def ping(self) -> bool:
        """Check that the deployment answers a ping."""
        try:
            self.db.client.admin.command("ping")
            return True
        except PyMongoError:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False

    def close(self) -> None:
        """Close the client. The handle can be reopened with connect()."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Closed MongoDB client for database %s", self._name)


# Module-level handle cache
_database: Optional[MongoDatabase] = None


def get_database() -> MongoDatabase:
    """
    Get the process-wide database handle.

    Returns:
        MongoDatabase configured from settings
    """
    global _database

    if _database is None:
        settings = get_settings()
        if not settings.mongodb_uri:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set SURVEYWALLET_MONGODB_URI environment variable."
            )
        _database = MongoDatabase(
            settings.mongodb_uri,
            settings.mongodb_database,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    return _database


def reset_database_cache() -> None:
    """
    Drop the cached handle without closing it.

    Useful for testing or when configuration changes.
    """
    global _database
    _database = None
