"""
Payment reconciliation.

Recording a payment is two writes: insert the payment, then mark its booking
paid. The storage layer offers no transaction spanning both, so they are
committed separately. When the second write finds no booking, the payment is
kept and marked ``orphaned`` for an admin to resolve; it is never deleted.
A crash between the two commits leaves the payment ``recorded`` with an
unpaid booking.
"""
import logging
from typing import List, Optional

from courtbook.core.exceptions import NotFoundException, ValidationException
from courtbook.core.ids import is_valid_id, normalize_id, utcnow
from courtbook.models.payment import Payment
from courtbook.repositories.booking_repository import BookingRepository
from courtbook.repositories.payment_repository import PaymentRepository
from courtbook.schemas.payment import PaymentCreate

logger = logging.getLogger(__name__)


class PaymentService:
    """Records payments and keeps their bookings in sync."""

    def __init__(self, payments: PaymentRepository, bookings: BookingRepository):
        self.payments = payments
        self.bookings = bookings

    async def record(self, data: PaymentCreate) -> Payment:
        """
        Persist a payment and mark its booking paid.

        Raises:
            ValidationException: booking id missing or malformed
            NotFoundException: no booking matched; the payment is already
                stored and has been marked orphaned
        """
        if not is_valid_id(data.booking_id):
            raise ValidationException("Invalid or missing booking ID")
        booking_id = normalize_id(data.booking_id)

        payment = await self.payments.create(
            booking_id=booking_id,
            email=data.email,
            amount=data.amount,
            payment_method=data.payment_method,
            transaction_id=data.transaction_id,
            discount=data.discount or 0,
            coupon=data.coupon or None,
            status="recorded",
            created_at=utcnow(),
        )
        logger.info(f"Recorded payment {payment.id} for booking {booking_id}")

        if not await self.bookings.set_status(booking_id, "paid"):
            await self.payments.mark_orphaned(payment.id)
            logger.warning(
                f"Payment {payment.id} references missing booking {booking_id}; marked orphaned"
            )
            raise NotFoundException("Booking not found or status not updated")

        logger.info(f"Booking {booking_id} marked paid")
        return payment

    async def history(self, email: Optional[str]) -> List[Payment]:
        return await self.payments.list_for_email(email)

    async def orphaned(self) -> List[Payment]:
        return await self.payments.list_by_status("orphaned")
