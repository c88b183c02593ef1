"""Tests for the payment repository."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING

from modules.payments.repository import PaymentRepository


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def collection(mock_db):
    return mock_db.__getitem__.return_value


class TestPaymentRepository:
    def test_create_stores_amount_as_string(self, mock_db, collection):
        collection.insert_one.return_value = MagicMock(inserted_id=ObjectId())

        payment = PaymentRepository(mock_db).create(
            payer="a@example.com",
            amount=Decimal("10.50"),
            currency="usd",
            provider_reference="pi_123",
        )

        mock_db.__getitem__.assert_called_with("payments")
        doc = collection.insert_one.call_args.args[0]
        assert doc["amount"] == "10.50"
        assert payment.amount == Decimal("10.50")

    def test_get_by_id_parses_decimal(self, mock_db, collection):
        payment_id = ObjectId()
        collection.find_one.return_value = {
            "_id": payment_id,
            "payer": "a@example.com",
            "amount": "3.10",
            "currency": "usd",
            "provider_reference": "pi_1",
            "created_at": datetime.now(timezone.utc),
        }

        payment = PaymentRepository(mock_db).get_by_id(str(payment_id))

        collection.find_one.assert_called_once_with({"_id": payment_id})
        assert payment.amount == Decimal("3.10")

    def test_list_by_payer(self, mock_db, collection):
        collection.find.return_value.sort.return_value = []

        PaymentRepository(mock_db).list_payments(payer="a@example.com")

        collection.find.assert_called_once_with({"payer": "a@example.com"})
        collection.find.return_value.sort.assert_called_once_with("created_at", DESCENDING)
