"""Coupon endpoints."""
from typing import List
from fastapi import APIRouter, Depends

from courtbook.api.deps import get_coupon_service, get_current_identity, require_admin
from courtbook.schemas import (
    CouponCreate,
    CouponInDB,
    CouponUpdate,
    CouponValidation,
    InsertResult,
    SuccessResult,
)
from courtbook.services.coupon_service import CouponService

router = APIRouter(prefix="/coupons", tags=["coupons"])


@router.get("", response_model=List[CouponInDB])
async def list_coupons(service: CouponService = Depends(get_coupon_service)):
    """List all coupons."""
    return await service.list_all()


@router.post("", response_model=InsertResult, dependencies=[Depends(require_admin)])
async def create_coupon(coupon: CouponCreate, service: CouponService = Depends(get_coupon_service)):
    """Create a coupon (admin)."""
    created = await service.create(coupon)
    return InsertResult(inserted_id=created.id)


@router.get("/{code}", response_model=CouponValidation, dependencies=[Depends(get_current_identity)])
async def validate_coupon(code: str, service: CouponService = Depends(get_coupon_service)):
    """
    Check a coupon code.

    Returns the discount when the code exists and has not expired. Unknown
    codes answer 404 and expired ones 400, both with ``isValid: false``.

    Args:
        code: Coupon code, surrounding whitespace ignored
        service: Coupon service
    """
    coupon = await service.validate(code)
    return CouponValidation(discount=coupon.discount, code=coupon.code, expiry=coupon.expiry)


@router.put("/{coupon_id}", response_model=SuccessResult, dependencies=[Depends(require_admin)])
async def update_coupon(
    coupon_id: str,
    coupon_update: CouponUpdate,
    service: CouponService = Depends(get_coupon_service),
):
    """Update a coupon (admin)."""
    await service.update(coupon_id, coupon_update)
    return SuccessResult()


@router.delete("/{coupon_id}", response_model=SuccessResult, dependencies=[Depends(require_admin)])
async def delete_coupon(coupon_id: str, service: CouponService = Depends(get_coupon_service)):
    """Delete a coupon (admin)."""
    await service.delete(coupon_id)
    return SuccessResult()
