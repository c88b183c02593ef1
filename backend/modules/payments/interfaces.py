"""
Payments module interfaces.

IPaymentGateway hides the payment provider from the service so tests and
alternative providers can stand in for Stripe.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import (
    Payment,
    PaymentIntentRequest,
    PaymentIntentResponse,
    RecordPaymentRequest,
)


@runtime_checkable
class IPaymentGateway(Protocol):
    """Payment provider contract."""

    def create_intent(self, amount: Decimal, currency: str) -> str:
        """
        Create a payment intent with the provider.

        Args:
            amount: Amount in major currency units
            currency: ISO 4217 currency code

        Returns:
            The intent's client secret

        Raises:
            PaymentFailedError: If the provider rejects the request
        """
        ...


@runtime_checkable
class IPaymentService(Protocol):
    """Interface for payment operations."""

    async def create_intent(
        self,
        user: AuthenticatedUser,
        request: PaymentIntentRequest,
    ) -> PaymentIntentResponse:
        """
        Start a payment for the caller.

        Raises:
            InvalidAmountError: If the amount is not positive or has more
                than two decimal places
            PaymentFailedError: If the provider call fails
        """
        ...

    async def record_payment(
        self,
        user: AuthenticatedUser,
        request: RecordPaymentRequest,
    ) -> Payment:
        """Record a completed payment with the caller as payer."""
        ...

    async def list_payments(self) -> list[Payment]:
        """List every payment, newest first."""
        ...

    async def list_for_payer(self, email: str) -> list[Payment]:
        """List one payer's payments, newest first."""
        ...

    async def get_payment(self, payment_id: str, user: AuthenticatedUser) -> Payment:
        """
        Get a payment. Payer or admin only.

        Raises:
            PaymentNotFoundError: If the payment doesn't exist
            AuthorizationError: If the caller is neither payer nor admin
        """
        ...
