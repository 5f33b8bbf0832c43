"""Booking data access."""
from typing import List, Optional

from sqlalchemy import select

from courtbook.models.booking import Booking
from courtbook.repositories.base import BaseRepository


class BookingRepository(BaseRepository[Booking]):
    model = Booking

    async def search(
        self, status: Optional[str] = None, court_name: Optional[str] = None
    ) -> List[Booking]:
        """
        List bookings, optionally filtered.

        Args:
            status: Exact status to match
            court_name: Case-insensitive substring of the court name

        Returns:
            Matching bookings, oldest first
        """
        stmt = select(Booking)
        if status:
            stmt = stmt.where(Booking.status == status)
        if court_name:
            stmt = stmt.where(Booking.court_name.icontains(court_name, autoescape=True))
        result = await self.db.execute(stmt.order_by(Booking.created_at))
        return list(result.scalars().all())

    async def list_for_user(self, email: str, status: str) -> List[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_email == email, Booking.status == status)
            .order_by(Booking.created_at)
        )
        return list(result.scalars().all())

    async def set_status(self, booking_id: str, status: str) -> bool:
        """Single-row status write. Returns False when the booking is gone."""
        return await self.update_by_id(booking_id, status=status)
