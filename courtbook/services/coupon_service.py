"""Coupon validation and administration."""
import logging
from typing import List

from courtbook.core.exceptions import (
    CouponExpiredException,
    NotFoundException,
    ValidationException,
)
from courtbook.core.ids import as_utc, is_valid_id, normalize_id, utcnow
from courtbook.models.coupon import Coupon
from courtbook.repositories.coupon_repository import CouponRepository
from courtbook.schemas.coupon import CouponCreate, CouponUpdate

logger = logging.getLogger(__name__)

INVALID = {"isValid": False}


class CouponService:
    """Service for discount codes."""

    def __init__(self, coupons: CouponRepository):
        self.coupons = coupons

    async def validate(self, code: str) -> Coupon:
        """
        Check that ``code`` names an unexpired coupon.

        Lookup is exact and case-sensitive on the trimmed code. A coupon is
        still valid at the instant of its expiry.

        Raises:
            NotFoundException: no such code
            CouponExpiredException: expiry has passed
        """
        coupon = await self.coupons.get_by_code(code.strip())
        if coupon is None:
            raise NotFoundException("Coupon not found", extra=INVALID)
        if utcnow() > as_utc(coupon.expiry):
            raise CouponExpiredException("Coupon has expired", extra=INVALID)
        return coupon

    async def list_all(self) -> List[Coupon]:
        return await self.coupons.list_all()

    async def create(self, data: CouponCreate) -> Coupon:
        code = data.code.strip()
        if await self.coupons.get_by_code(code) is not None:
            raise ValidationException("Coupon code already exists")
        coupon = await self.coupons.create(code=code, discount=data.discount, expiry=data.expiry)
        logger.info(f"Created coupon {code}")
        return coupon

    async def update(self, coupon_id: str, data: CouponUpdate) -> None:
        coupon_id = self._parse_id(coupon_id)
        fields = data.model_dump(exclude_unset=True)
        if "code" in fields:
            fields["code"] = fields["code"].strip()
        if not fields:
            raise ValidationException("Nothing to update")
        if not await self.coupons.update_by_id(coupon_id, **fields):
            raise NotFoundException("Coupon not found")

    async def delete(self, coupon_id: str) -> None:
        if not await self.coupons.delete_by_id(self._parse_id(coupon_id)):
            raise NotFoundException("Coupon not found")

    @staticmethod
    def _parse_id(coupon_id: str) -> str:
        if not is_valid_id(coupon_id):
            raise ValidationException("Invalid coupon ID")
        return normalize_id(coupon_id)
