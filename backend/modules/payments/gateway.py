"""
Stripe payment gateway.
"""

import logging
from decimal import Decimal

import stripe

from .exceptions import PaymentFailedError
from .interfaces import IPaymentGateway

logger = logging.getLogger(__name__)


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (5.25) to the provider's minor units (525)."""
    return int((amount * 100).to_integral_value())


class StripePaymentGateway(IPaymentGateway):
    """Creates PaymentIntents through the Stripe SDK."""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def create_intent(self, amount: Decimal, currency: str) -> str:
        if not self._api_key:
            raise PaymentFailedError("Payment provider not configured")

        try:
            intent = stripe.PaymentIntent.create(
                amount=to_minor_units(amount),
                currency=currency,
                automatic_payment_methods={"enabled": True},
                api_key=self._api_key,
            )
        except stripe.StripeError as e:
            logger.error("Stripe PaymentIntent creation failed", exc_info=True)
            raise PaymentFailedError(
                "Payment provider rejected the request",
                stripe_error=e.user_message or str(e),
            ) from e

        return intent.client_secret
