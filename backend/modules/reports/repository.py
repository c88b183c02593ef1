"""
Report repository for database access.
"""

from datetime import datetime, timezone
from typing import Any

from pymongo import ASCENDING, DESCENDING

from shared.repository import BaseRepository, parse_object_id
from .models import Report


class ReportRepository(BaseRepository[Report]):
    """Repository for the reports collection."""

    collection_name = "reports"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("survey_id", ASCENDING)])
        self._collection.create_index([("created_at", DESCENDING)])

    def create(self, survey_id: str, reporter: str, reason: str) -> Report:
        doc = {
            "survey_id": parse_object_id(survey_id),
            "reporter": reporter,
            "reason": reason,
            "created_at": datetime.now(timezone.utc),
        }
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_report(doc)

    def list_reports(self) -> list[Report]:
        cursor = self._collection.find({}).sort("created_at", DESCENDING)
        return [self._map_to_report(doc) for doc in cursor]

    def delete(self, report_id: str) -> bool:
        result = self._collection.delete_one({"_id": parse_object_id(report_id)})
        return result.deleted_count > 0

    def delete_for_survey(self, survey_id: str) -> int:
        result = self._collection.delete_many({"survey_id": parse_object_id(survey_id)})
        return result.deleted_count

    def _map_to_report(self, doc: dict[str, Any]) -> Report:
        return Report(
            id=str(doc["_id"]),
            survey_id=str(doc["survey_id"]),
            reporter=doc["reporter"],
            reason=doc["reason"],
            created_at=doc["created_at"],
        )
