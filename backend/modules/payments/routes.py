"""
Payment endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_payment_service
from api.middleware.auth import get_current_user, require_role
from shared.models import AuthenticatedUser, UserRole

from .interfaces import IPaymentService
from .models import (
    Payment,
    PaymentIntentRequest,
    PaymentIntentResponse,
    RecordPaymentRequest,
)

router = APIRouter()


@router.post("/intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPaymentService = Depends(get_payment_service),
) -> PaymentIntentResponse:
    """Create a payment intent and return its client secret."""
    return await service.create_intent(user, request)


@router.post("", response_model=Payment)
async def record_payment(
    request: RecordPaymentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPaymentService = Depends(get_payment_service),
) -> Payment:
    """Record a payment confirmed by the provider."""
    return await service.record_payment(user, request)


@router.get("", response_model=list[Payment])
async def list_payments(
    _admin: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    service: IPaymentService = Depends(get_payment_service),
) -> list[Payment]:
    """List all payments. Admin only."""
    return await service.list_payments()


@router.get("/me", response_model=list[Payment])
async def list_my_payments(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPaymentService = Depends(get_payment_service),
) -> list[Payment]:
    """List the caller's own payments."""
    return await service.list_for_payer(user.email)


@router.get("/{payment_id}", response_model=Payment)
async def get_payment(
    payment_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPaymentService = Depends(get_payment_service),
) -> Payment:
    """Get a payment. Payer or admin only."""
    return await service.get_payment(payment_id, user)
