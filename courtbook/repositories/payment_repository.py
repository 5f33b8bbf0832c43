"""Payment data access."""
from typing import List, Optional

from sqlalchemy import select

from courtbook.models.payment import Payment
from courtbook.repositories.base import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    model = Payment

    async def list_for_email(self, email: Optional[str]) -> List[Payment]:
        """Payments for ``email`` (all payments when None), latest first."""
        stmt = select(Payment)
        if email:
            stmt = stmt.where(Payment.email == email)
        result = await self.db.execute(stmt.order_by(Payment.created_at.desc()))
        return list(result.scalars().all())

    async def list_by_status(self, status: str) -> List[Payment]:
        result = await self.db.execute(
            select(Payment)
            .where(Payment.status == status)
            .order_by(Payment.created_at.desc())
        )
        return list(result.scalars().all())

    async def mark_orphaned(self, payment_id: str) -> bool:
        return await self.update_by_id(payment_id, status="orphaned")
