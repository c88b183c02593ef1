"""
Payment service implementation.

Validates amounts, delegates intent creation to the payment gateway and
records confirmed payments.
"""

import logging
from decimal import Decimal

from shared.models import AuthenticatedUser, UserRole
from modules.auth.interfaces import IAuthService

from .interfaces import IPaymentGateway, IPaymentService
from .models import (
    Payment,
    PaymentIntentRequest,
    PaymentIntentResponse,
    RecordPaymentRequest,
)
from .repository import PaymentRepository
from .exceptions import InvalidAmountError, PaymentNotFoundError

logger = logging.getLogger(__name__)


def _validate_amount(amount: Decimal) -> None:
    if amount <= 0:
        raise InvalidAmountError(amount, "Amount must be positive")
    if amount.as_tuple().exponent < -2:
        raise InvalidAmountError(amount, "Amount must have at most two decimal places")


class PaymentService(IPaymentService):
    """Payments over MongoDB and the configured payment gateway."""

    def __init__(
        self,
        repository: PaymentRepository,
        gateway: IPaymentGateway,
        auth: IAuthService,
    ):
        self._repository = repository
        self._gateway = gateway
        self._auth = auth

    async def create_intent(
        self,
        user: AuthenticatedUser,
        request: PaymentIntentRequest,
    ) -> PaymentIntentResponse:
        _validate_amount(request.amount)
        client_secret = self._gateway.create_intent(request.amount, request.currency.lower())
        logger.info(
            "Created payment intent for %s %s", request.amount, request.currency,
            extra={"user_email": user.email},
        )
        return PaymentIntentResponse(client_secret=client_secret)

    async def record_payment(
        self,
        user: AuthenticatedUser,
        request: RecordPaymentRequest,
    ) -> Payment:
        _validate_amount(request.amount)
        payment = self._repository.create(
            payer=user.email,
            amount=request.amount,
            currency=request.currency.lower(),
            provider_reference=request.provider_reference,
        )
        logger.info("Recorded payment %s", payment.id, extra={"user_email": user.email})
        return payment

    async def list_payments(self) -> list[Payment]:
        return self._repository.list_payments()

    async def list_for_payer(self, email: str) -> list[Payment]:
        return self._repository.list_payments(payer=email)

    async def get_payment(self, payment_id: str, user: AuthenticatedUser) -> Payment:
        payment = self._repository.get_by_id(payment_id)
        if payment is None:
            raise PaymentNotFoundError(payment_id)
        if payment.payer != user.email:
            await self._auth.authorize(user, UserRole.ADMIN)
        return payment
