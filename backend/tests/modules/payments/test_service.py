import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId

from shared.models import UserRole
from modules.auth.exceptions import InsufficientPermissionsError
from modules.payments.models import Payment, PaymentIntentRequest, RecordPaymentRequest
from modules.payments.service import PaymentService
from modules.payments.exceptions import (
    InvalidAmountError,
    PaymentFailedError,
    PaymentNotFoundError,
)


def make_payment(payer: str = "member@example.com") -> Payment:
    return Payment(
        id=str(ObjectId()),
        payer=payer,
        amount=Decimal("10.00"),
        currency="usd",
        provider_reference="pi_123",
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def mock_repository():
    return MagicMock()


@pytest.fixture
def mock_gateway():
    gateway = MagicMock()
    gateway.create_intent.return_value = "pi_secret"
    return gateway


@pytest.fixture
def mock_auth():
    return AsyncMock()


@pytest.fixture
def service(mock_repository, mock_gateway, mock_auth):
    return PaymentService(repository=mock_repository, gateway=mock_gateway, auth=mock_auth)


class TestCreateIntent:
    @pytest.mark.asyncio
    async def test_create_intent(self, service, mock_gateway, member):
        response = await service.create_intent(
            member, PaymentIntentRequest(amount=Decimal("9.99"), currency="USD"),
        )

        assert response.client_secret == "pi_secret"
        mock_gateway.create_intent.assert_called_once_with(Decimal("9.99"), "usd")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5"), Decimal("1.005")])
    async def test_invalid_amount(self, service, mock_gateway, member, amount):
        with pytest.raises(InvalidAmountError):
            await service.create_intent(member, PaymentIntentRequest(amount=amount))
        mock_gateway.create_intent.assert_not_called()

    @pytest.mark.asyncio
    async def test_gateway_failure_propagates(self, service, mock_gateway, member):
        mock_gateway.create_intent.side_effect = PaymentFailedError("declined")
        with pytest.raises(PaymentFailedError):
            await service.create_intent(member, PaymentIntentRequest(amount=Decimal("5")))


class TestRecordAndRead:
    @pytest.mark.asyncio
    async def test_record_payment(self, service, mock_repository, member):
        mock_repository.create.return_value = make_payment()

        await service.record_payment(
            member,
            RecordPaymentRequest(amount=Decimal("10.00"), currency="USD", provider_reference="pi_123"),
        )

        mock_repository.create.assert_called_once_with(
            payer=member.email,
            amount=Decimal("10.00"),
            currency="usd",
            provider_reference="pi_123",
        )

    @pytest.mark.asyncio
    async def test_payer_reads_own_payment(self, service, mock_repository, mock_auth, member):
        payment = make_payment(member.email)
        mock_repository.get_by_id.return_value = payment

        assert await service.get_payment(payment.id, member) == payment
        mock_auth.authorize.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_user_needs_admin(self, service, mock_repository, mock_auth, member):
        payment = make_payment("someone@example.com")
        mock_repository.get_by_id.return_value = payment
        mock_auth.authorize.side_effect = InsufficientPermissionsError("admin", "member")

        with pytest.raises(InsufficientPermissionsError):
            await service.get_payment(payment.id, member)

        mock_auth.authorize.assert_awaited_once_with(member, UserRole.ADMIN)

    @pytest.mark.asyncio
    async def test_missing_payment(self, service, mock_repository, member):
        mock_repository.get_by_id.return_value = None
        with pytest.raises(PaymentNotFoundError):
            await service.get_payment(str(ObjectId()), member)

    @pytest.mark.asyncio
    async def test_list_for_payer(self, service, mock_repository):
        mock_repository.list_payments.return_value = []
        await service.list_for_payer("member@example.com")
        mock_repository.list_payments.assert_called_once_with(payer="member@example.com")
