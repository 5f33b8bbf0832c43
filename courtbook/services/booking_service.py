"""Booking lifecycle: creation, status transitions, queries and deletion."""
import logging
from typing import Dict, FrozenSet, List, Optional

from courtbook.core.exceptions import NotFoundException, ValidationException
from courtbook.core.ids import is_valid_id, normalize_id, utcnow
from courtbook.models.booking import Booking
from courtbook.repositories.booking_repository import BookingRepository
from courtbook.repositories.court_repository import CourtRepository
from courtbook.schemas.booking import BookingCreate
from courtbook.services.role_escalation import RoleEscalation

logger = logging.getLogger(__name__)

TRANSITION_TARGETS: FrozenSet[str] = frozenset({"approved", "rejected", "confirmed", "paid"})

# rejected and paid are terminal; nothing leads back to pending
ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "pending": frozenset({"approved", "rejected"}),
    "approved": frozenset({"confirmed", "paid"}),
    "confirmed": frozenset({"paid"}),
    "rejected": frozenset(),
    "paid": frozenset(),
}

USER_STATUS_FILTERS: FrozenSet[str] = frozenset({"approved", "paid", "pending"})


def parse_booking_id(booking_id: Optional[str]) -> str:
    if not is_valid_id(booking_id):
        raise ValidationException("Invalid booking ID")
    return normalize_id(booking_id)


class BookingService:
    """Owns booking creation and status transitions."""

    def __init__(
        self,
        bookings: BookingRepository,
        courts: CourtRepository,
        role_escalation: RoleEscalation,
        enforce_transitions: bool = False,
    ):
        self.bookings = bookings
        self.courts = courts
        self.role_escalation = role_escalation
        self.enforce_transitions = enforce_transitions

    async def create(self, data: BookingCreate) -> Booking:
        """
        Create a pending booking.

        The court lookup and the insert are separate operations: a court
        deleted in between leaves the booking referencing a missing court.

        Raises:
            ValidationException: court id is malformed
            NotFoundException: court does not exist
        """
        if not is_valid_id(data.court_id):
            raise ValidationException("Invalid court ID")
        court_id = normalize_id(data.court_id)

        court = await self.courts.get_by_id(court_id)
        if court is None:
            raise NotFoundException("Court not found")

        # Client-supplied status is ignored
        booking = await self.bookings.create(
            court_id=court_id,
            court_name=data.court_name,
            user_email=data.user_email,
            date=data.date,
            slots=list(data.slots),
            total_price=data.total_price,
            status="pending",
            created_at=utcnow(),
        )
        logger.info(f"Created booking {booking.id} for {booking.user_email} on {booking.date}")
        return booking

    async def get(self, booking_id: str) -> Booking:
        booking = await self.bookings.get_by_id(parse_booking_id(booking_id))
        if booking is None:
            raise NotFoundException("Booking not found")
        return booking

    async def transition(self, booking_id: str, target: str) -> Booking:
        """
        Move a booking to ``target``.

        With transition enforcement on, only moves listed in
        ALLOWED_TRANSITIONS are accepted; with it off, any booking may move to
        any target. Approval promotes the booking's owner to member.

        Raises:
            ValidationException: malformed id, unknown target or illegal move
            NotFoundException: booking does not exist
        """
        booking_id = parse_booking_id(booking_id)
        if target not in TRANSITION_TARGETS:
            raise ValidationException("Invalid status")

        booking = await self.bookings.get_by_id(booking_id)
        if booking is None:
            raise NotFoundException("Booking not found")

        current = booking.status
        if self.enforce_transitions and target not in ALLOWED_TRANSITIONS.get(current, frozenset()):
            raise ValidationException(f"Cannot change booking from {current} to {target}")

        if not await self.bookings.set_status(booking_id, target):
            # Deleted between the read and the write
            raise NotFoundException("Booking not found")
        booking.status = target
        logger.info(f"Booking {booking_id}: {current} -> {target}")

        if target == "approved":
            await self.role_escalation.escalate(booking.user_email)

        return booking

    async def list_for_user(self, email: str, status: str) -> List[Booking]:
        if status not in USER_STATUS_FILTERS:
            raise ValidationException("Invalid status filter")
        return await self.bookings.list_for_user(email, status)

    async def search(self, status: Optional[str] = None, search: Optional[str] = None) -> List[Booking]:
        return await self.bookings.search(status=status, court_name=search)

    async def delete(self, booking_id: str) -> None:
        booking_id = parse_booking_id(booking_id)
        if not await self.bookings.delete_by_id(booking_id):
            raise NotFoundException("Booking not found")
        logger.info(f"Deleted booking {booking_id}")
