"""
Payment repository for database access.

Amounts are written as strings and parsed back to Decimal on read.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

from pymongo import ASCENDING, DESCENDING

from shared.repository import BaseRepository, parse_object_id
from .models import Payment


class PaymentRepository(BaseRepository[Payment]):
    """Repository for the payments collection. Insert and read only."""

    collection_name = "payments"

    def ensure_indexes(self) -> None:
        self._collection.create_index([("payer", ASCENDING), ("created_at", DESCENDING)])

    def create(
        self,
        payer: str,
        amount: Decimal,
        currency: str,
        provider_reference: str,
    ) -> Payment:
        doc = {
            "payer": payer,
            "amount": str(amount),
            "currency": currency,
            "provider_reference": provider_reference,
            "created_at": datetime.now(timezone.utc),
        }
        result = self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return self._map_to_payment(doc)

    def get_by_id(self, payment_id: str) -> Optional[Payment]:
        doc = self._collection.find_one({"_id": parse_object_id(payment_id)})
        return self._map_to_payment(doc) if doc else None

    def list_payments(self, payer: Optional[str] = None) -> list[Payment]:
        query = {"payer": payer} if payer is not None else {}
        cursor = self._collection.find(query).sort("created_at", DESCENDING)
        return [self._map_to_payment(doc) for doc in cursor]

    def _map_to_payment(self, doc: dict[str, Any]) -> Payment:
        return Payment(
            id=str(doc["_id"]),
            payer=doc["payer"],
            amount=Decimal(doc["amount"]),
            currency=doc["currency"],
            provider_reference=doc["provider_reference"],
            created_at=doc["created_at"],
        )
