"""Coupon schemas."""
from datetime import datetime
from typing import Optional
from pydantic import Field

from courtbook.schemas.base import CamelModel


class CouponCreate(CamelModel):
    """Schema for creating a coupon."""

    code: str = Field(min_length=1)
    discount: float = Field(gt=0)
    expiry: datetime


class CouponUpdate(CamelModel):
    """Schema for updating a coupon."""

    code: Optional[str] = Field(default=None, min_length=1)
    discount: Optional[float] = Field(default=None, gt=0)
    expiry: Optional[datetime] = None


class CouponInDB(CamelModel):
    """Schema for coupon from database."""

    id: str
    code: str
    discount: float
    expiry: datetime


class CouponValidation(CamelModel):
    """Schema for a successful coupon check."""

    is_valid: bool = True
    discount: float
    code: str
    expiry: datetime
