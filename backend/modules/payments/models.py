"""
Payments module data models.

Amounts are decimals in major currency units (e.g., 5.00 = $5.00) and are
stored as strings so no precision is lost in the database.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field


class Payment(BaseModel):
    """
    A recorded payment.

    Payments are immutable once recorded.
    """

    id: str = Field(..., description="Payment ID (ObjectId)")
    payer: EmailStr = Field(..., description="Email of the paying user")
    amount: Decimal = Field(..., description="Amount in major currency units")
    currency: str = Field(..., description="ISO 4217 currency code, lowercase")
    provider_reference: str = Field(..., description="Payment provider's ID (e.g., Stripe PaymentIntent ID)")
    created_at: datetime = Field(..., description="When the payment was recorded")


class PaymentIntentRequest(BaseModel):
    """Request to start a payment with the provider."""

    amount: Decimal = Field(..., description="Amount in major currency units")
    currency: str = Field(default="usd", min_length=3, max_length=3)


class PaymentIntentResponse(BaseModel):
    """Client secret the frontend uses to confirm the payment."""

    client_secret: str


class RecordPaymentRequest(BaseModel):
    """Request to record a payment confirmed by the provider."""

    amount: Decimal = Field(..., description="Amount in major currency units")
    currency: str = Field(default="usd", min_length=3, max_length=3)
    provider_reference: str = Field(..., min_length=1, max_length=255)
