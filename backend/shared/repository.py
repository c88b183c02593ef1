"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB collection access and shared helpers for identifiers and mapping.
"""

from typing import Generic, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.collection import Collection
from pymongo.database import Database

from .exceptions import InvalidIdentifierError


T = TypeVar("T")


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a client-supplied identifier to an ObjectId.

    Raises:
        InvalidIdentifierError: If the value is not a valid ObjectId
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(str(value))


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - MongoDB database access via self._db
    - The repository's primary collection via self._collection
    - Generic type parameter for model type hints

    Subclasses set ``collection_name`` and handle document-to-Pydantic
    mapping internally.

    Example:
        class ReportRepository(BaseRepository[Report]):
            collection_name = "reports"

            def get_by_id(self, report_id: str) -> Optional[Report]:
                doc = self._collection.find_one({"_id": parse_object_id(report_id)})
                return self._map_to_report(doc) if doc else None
    """

    collection_name: str = ""

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a MongoDB database.

        Args:
            db: pymongo Database instance for database operations.
        """
        self._db = db

    @property
    def _collection(self) -> Collection:
        return self._db[self.collection_name]

    def ensure_indexes(self) -> None:
        """Create the indexes this repository relies on. No-op by default."""
        return None

