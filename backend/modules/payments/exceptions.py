"""
Payments module exceptions.

These exceptions are raised by the payments module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from decimal import Decimal
from typing import Optional

from shared.exceptions import ExternalServiceError, NotFoundError, ValidationError


class InvalidAmountError(ValidationError):
    """Raised when a payment amount is invalid."""

    def __init__(self, amount: Decimal, reason: str):
        super().__init__(
            f"Invalid amount: {amount}. {reason}",
            code="INVALID_AMOUNT",
            details={"amount": str(amount), "reason": reason},
        )


class PaymentFailedError(ExternalServiceError):
    """Raised when the payment provider rejects or cannot serve a request."""

    def __init__(self, message: str, stripe_error: Optional[str] = None):
        super().__init__(
            message,
            service="stripe",
            code="PAYMENT_FAILED",
            details={"stripe_error": stripe_error} if stripe_error else {},
        )


class PaymentNotFoundError(NotFoundError):
    """Raised when a payment record does not exist."""

    def __init__(self, payment_id: str):
        super().__init__(
            f"Payment not found: {payment_id}",
            code="PAYMENT_NOT_FOUND",
            details={"payment_id": payment_id},
        )
