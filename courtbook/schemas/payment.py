"""Payment schemas."""
from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator

from courtbook.schemas.base import CamelModel


class PaymentCreate(CamelModel):
    """Schema for recording a completed payment."""

    booking_id: Optional[str] = None
    email: Optional[str] = None
    amount: Optional[float] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    discount: Optional[float] = 0
    coupon: Optional[str] = None

    @field_validator("discount")
    @classmethod
    def default_discount(cls, value: Optional[float]) -> float:
        return value or 0


class PaymentInDB(CamelModel):
    """Schema for payment from database."""

    id: str
    booking_id: str
    email: Optional[str] = None
    amount: Optional[float] = None
    payment_method: Optional[str] = None
    transaction_id: Optional[str] = None
    discount: float
    coupon: Optional[str] = None
    status: str
    created_at: datetime


class PaymentRecorded(CamelModel):
    """Schema for a reconciled payment."""

    success: bool = True
    message: str = "Payment recorded and booking confirmed"


class PaymentIntentCreate(CamelModel):
    """Schema for requesting a payment intent, amount in the smallest currency unit."""

    amount: int = Field(gt=0)
