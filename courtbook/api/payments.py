"""Payment endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from courtbook.api.deps import (
    get_current_identity,
    get_payment_processor,
    get_payment_service,
    require_admin,
)
from courtbook.core.exceptions import ForbiddenException
from courtbook.schemas import PaymentCreate, PaymentInDB, PaymentIntentCreate, PaymentRecorded
from courtbook.services.auth import Identity
from courtbook.services.payment_processor import StripePaymentProcessor
from courtbook.services.payment_service import PaymentService

router = APIRouter(tags=["payments"])


@router.get("/payments", response_model=List[PaymentInDB])
async def list_payments(
    email: Optional[str] = Query(default=None),
    identity: Identity = Depends(get_current_identity),
    service: PaymentService = Depends(get_payment_service),
):
    """Payment history for the caller, latest first."""
    if identity.email != email:
        raise ForbiddenException("forbidden access")
    return await service.history(email)


@router.get("/payments/orphaned", response_model=List[PaymentInDB], dependencies=[Depends(require_admin)])
async def list_orphaned_payments(service: PaymentService = Depends(get_payment_service)):
    """Payments whose booking could not be marked paid (admin)."""
    return await service.orphaned()


@router.post("/payments", response_model=PaymentRecorded, dependencies=[Depends(get_current_identity)])
async def record_payment(
    payment: PaymentCreate,
    service: PaymentService = Depends(get_payment_service),
):
    """
    Record a completed payment and mark its booking paid.

    If the booking cannot be found the payment stays stored, flagged as
    orphaned, and 404 is returned.

    Args:
        payment: Payment details from the client after capture
        service: Payment service
    """
    await service.record(payment)
    return PaymentRecorded()


@router.post("/create-payment-intent", response_model=str, dependencies=[Depends(get_current_identity)])
async def create_payment_intent(
    intent: PaymentIntentCreate,
    processor: StripePaymentProcessor = Depends(get_payment_processor),
):
    """Create a payment intent at the processor and return its client secret."""
    return await processor.create_payment_intent(intent.amount)
