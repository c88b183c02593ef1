"""
Payments module.

Handles Stripe payment intents and the record of completed payments.

Public API:
- IPaymentService: Interface for payment operations
- IPaymentGateway: Payment provider contract
- Payment: Payment record
- Payment exceptions: PaymentFailedError, InvalidAmountError, etc.
"""

from .interfaces import IPaymentGateway, IPaymentService
from .models import (
    Payment,
    PaymentIntentRequest,
    PaymentIntentResponse,
    RecordPaymentRequest,
)
from .exceptions import (
    InvalidAmountError,
    PaymentFailedError,
    PaymentNotFoundError,
)

__all__ = [
    # Interfaces
    "IPaymentGateway",
    "IPaymentService",
    # Models
    "Payment",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "RecordPaymentRequest",
    # Exceptions
    "InvalidAmountError",
    "PaymentFailedError",
    "PaymentNotFoundError",
]
