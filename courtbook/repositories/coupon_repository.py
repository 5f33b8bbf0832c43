"""Coupon data access."""
from typing import Optional

from sqlalchemy import select

from courtbook.models.coupon import Coupon
from courtbook.repositories.base import BaseRepository


class CouponRepository(BaseRepository[Coupon]):
    model = Coupon

    async def get_by_code(self, code: str) -> Optional[Coupon]:
        result = await self.db.execute(select(Coupon).where(Coupon.code == code))
        return result.scalar_one_or_none()
