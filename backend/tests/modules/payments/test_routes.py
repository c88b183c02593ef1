"""
Tests for payment API endpoints.
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_auth_service, get_payment_service
from shared.models import UserRole
from modules.payments.models import Payment, PaymentIntentResponse
from modules.payments.exceptions import InvalidAmountError, PaymentFailedError


@pytest.fixture
def payment_service():
    return AsyncMock()


@pytest.fixture
def client(auth_service, payment_service):
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_payment_service] = lambda: payment_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers(make_token):
    return {"Authorization": f"Bearer {make_token('member@example.com')}"}


class TestPaymentIntent:
    def test_create_intent(self, client, payment_service, headers):
        payment_service.create_intent.return_value = PaymentIntentResponse(client_secret="pi_secret")

        response = client.post("/api/v1/payments/intent", json={"amount": "12.50"}, headers=headers)

        assert response.status_code == 200
        assert response.json() == {"client_secret": "pi_secret"}
        request = payment_service.create_intent.call_args.args[1]
        assert request.amount == Decimal("12.50")
        assert request.currency == "usd"

    def test_requires_auth(self, client, payment_service):
        response = client.post("/api/v1/payments/intent", json={"amount": "12.50"})
        assert response.status_code == 401
        payment_service.create_intent.assert_not_awaited()

    def test_gateway_failure_is_502(self, client, payment_service, headers):
        payment_service.create_intent.side_effect = PaymentFailedError("Payment provider rejected the request")

        response = client.post("/api/v1/payments/intent", json={"amount": "12.50"}, headers=headers)

        assert response.status_code == 502
        assert response.json()["error"] == "PAYMENT_FAILED"

    def test_invalid_amount_is_400(self, client, payment_service, headers):
        payment_service.create_intent.side_effect = InvalidAmountError(Decimal("0"), "Amount must be positive")

        response = client.post("/api/v1/payments/intent", json={"amount": "0"}, headers=headers)

        assert response.status_code == 400


class TestPaymentRecords:
    def test_my_payments(self, client, payment_service, headers):
        payment_service.list_for_payer.return_value = [
            Payment(
                id="65a1b2c3d4e5f60718293a4b",
                payer="member@example.com",
                amount=Decimal("10.00"),
                currency="usd",
                provider_reference="pi_123",
                created_at=datetime.now(timezone.utc),
            )
        ]

        response = client.get("/api/v1/payments/me", headers=headers)

        assert response.status_code == 200
        assert response.json()[0]["provider_reference"] == "pi_123"
        payment_service.list_for_payer.assert_awaited_once_with("member@example.com")

    def test_list_all_requires_admin(self, client, payment_service, user_directory, headers, make_user_record):
        user_directory.get_user_by_email.return_value = make_user_record("member@example.com", UserRole.MEMBER)

        response = client.get("/api/v1/payments", headers=headers)

        assert response.status_code == 403
        payment_service.list_payments.assert_not_awaited()
