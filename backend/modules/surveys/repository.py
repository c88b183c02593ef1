"""
Survey repository for database access.

Encapsulates all MongoDB queries and document mapping for:
- surveys
- comments

Every mutation is a single store operation. List appends use $push inside
one document update so concurrent appends to the same list both survive.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument

from shared.repository import BaseRepository, parse_object_id
from .models import (
    Comment,
    ParticipationEntry,
    Survey,
    SurveyStatus,
    VoteKind,
)

# List field and counter touched by each side of the like/dislike toggle
_VOTE_FIELDS = {
    VoteKind.LIKE: ("liked_by", "likes"),
    VoteKind.DISLIKE: ("disliked_by", "dislikes"),
}


class SurveyRepository(BaseRepository[Survey]):
    """
    Repository for survey data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership and roles.
    """

    collection_name = "surveys"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("status", ASCENDING), ("created_at", DESCENDING)])
        self._collection.create_index([("owner", ASCENDING)])
        self._collection.create_index([("featured", ASCENDING)])

    # -------------------------------------------------------------------------
    # Create / read
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any]) -> Survey:
        """
        Insert a new survey document.

        Args:
            data: Survey fields without ``_id``; the store assigns it.

        Returns:
            The created Survey.
        """
        now = datetime.now(timezone.utc)
        doc = {
            **data,
            "participants": [],
            "total_votes": 0,
            "liked_by": [],
            "disliked_by": [],
            "likes": 0,
            "dislikes": 0,
            "created_at": now,
            "updated_at": now,
        }
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_survey(doc)

    def get_by_id(self, survey_id: str) -> Optional[Survey]:
        doc = self._collection.find_one({"_id": parse_object_id(survey_id)})
        return self._map_to_survey(doc) if doc else None

    def exists(self, survey_id: str) -> bool:
        return self._collection.find_one(
            {"_id": parse_object_id(survey_id)}, {"_id": 1}
        ) is not None

    def list_surveys(
        self,
        status: Optional[SurveyStatus] = None,
        featured: Optional[bool] = None,
        owner: Optional[str] = None,
        category: Optional[str] = None,
    ) -> list[Survey]:
        """List surveys matching every given filter, newest first."""
        query: dict[str, Any] = {}
        if status is not None:
            query["status"] = status.value
        if featured is not None:
            query["featured"] = featured
        if owner is not None:
            query["owner"] = owner
        if category is not None:
            query["category"] = category

        cursor = self._collection.find(query).sort("created_at", DESCENDING)
        return [self._map_to_survey(doc) for doc in cursor]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def append_participation(
        self,
        survey_id: str,
        entry: ParticipationEntry,
    ) -> Optional[Survey]:
        """
        Append a participation entry and bump the vote total atomically.

        The filter only matches when the choice is a valid option and the
        subject has not participated yet.

        Returns:
            The updated Survey, or None when the guarded filter matched
            nothing (missing survey, invalid choice or duplicate subject).
        """
        doc = self._collection.find_one_and_update(
            {
                "_id": parse_object_id(survey_id),
                "options": entry.choice,
                "participants.user": {"$ne": entry.user},
            },
            {
                "$push": {"participants": entry.model_dump()},
                "$inc": {"total_votes": 1},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_survey(doc) if doc else None

    def append_vote(
        self,
        survey_id: str,
        user: str,
        kind: VoteKind,
    ) -> Optional[Survey]:
        """
        Add a subject to exactly one of liked_by/disliked_by and bump that
        side's counter.

        The filter only matches when the subject is on neither side.

        Returns:
            The updated Survey, or None when nothing matched.
        """
        list_field, counter_field = _VOTE_FIELDS[kind]
        doc = self._collection.find_one_and_update(
            {
                "_id": parse_object_id(survey_id),
                "liked_by": {"$ne": user},
                "disliked_by": {"$ne": user},
            },
            {
                "$push": {list_field: user},
                "$inc": {counter_field: 1},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_survey(doc) if doc else None

    def patch_fields(self, survey_id: str, fields: dict[str, Any]) -> Optional[Survey]:
        """
        Overwrite the given fields verbatim.

        Returns:
            The updated Survey, or None if the survey doesn't exist.
        """
        doc = self._collection.find_one_and_update(
            {"_id": parse_object_id(survey_id)},
            {"$set": {**fields, "updated_at": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        return self._map_to_survey(doc) if doc else None

    def delete(self, survey_id: str) -> bool:
        """
        Delete a survey.

        Returns:
            True if a document was removed.
        """
        result = self._collection.delete_one({"_id": parse_object_id(survey_id)})
        return result.deleted_count > 0

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_survey(self, doc: dict[str, Any]) -> Survey:
        """Map a survey document to Survey model."""
        return Survey(
            id=str(doc["_id"]),
            owner=doc["owner"],
            title=doc.get("title"),
            description=doc.get("description"),
            category=doc.get("category"),
            question=doc["question"],
            options=doc.get("options", []),
            deadline=doc.get("deadline"),
            participants=[
                ParticipationEntry(**entry) for entry in doc.get("participants", [])
            ],
            total_votes=doc.get("total_votes", 0),
            liked_by=doc.get("liked_by", []),
            disliked_by=doc.get("disliked_by", []),
            likes=doc.get("likes", 0),
            dislikes=doc.get("dislikes", 0),
            featured=doc.get("featured", False),
            status=SurveyStatus(doc.get("status", SurveyStatus.PUBLISHED.value)),
            admin_feedback=doc.get("admin_feedback"),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )


class CommentRepository(BaseRepository[Comment]):
    """Repository for survey comments."""

    collection_name = "comments"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("survey_id", ASCENDING), ("created_at", ASCENDING)])

    def create(self, survey_id: str, author: str, body: str) -> Comment:
        doc = {
            "survey_id": parse_object_id(survey_id),
            "author": author,
            "body": body,
            "created_at": datetime.now(timezone.utc),
        }
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_comment(doc)

    def list_for_survey(self, survey_id: str) -> list[Comment]:
        cursor = self._collection.find(
            {"survey_id": parse_object_id(survey_id)}
        ).sort("created_at", ASCENDING)
        return [self._map_to_comment(doc) for doc in cursor]

    def delete_for_survey(self, survey_id: str) -> int:
        result = self._collection.delete_many({"survey_id": parse_object_id(survey_id)})
        return result.deleted_count

    def _map_to_comment(self, doc: dict[str, Any]) -> Comment:
        return Comment(
            id=str(doc["_id"]),
            survey_id=str(doc["survey_id"]),
            author=doc["author"],
            body=doc["body"],
            created_at=doc["created_at"],
        )
