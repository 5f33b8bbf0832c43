"""Booking schemas."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field, field_validator

from courtbook.schemas.base import CamelModel

BookingStatus = Literal["pending", "approved", "rejected", "confirmed", "paid"]
TransitionTarget = Literal["approved", "rejected", "confirmed", "paid"]


class BookingCreate(CamelModel):
    """Schema for creating a booking."""

    user_email: str = Field(min_length=1)
    court_id: str = Field(min_length=1)
    court_name: str = Field(min_length=1)
    date: str = Field(min_length=1)
    slots: List[str] = Field(min_length=1)
    total_price: float = Field(gt=0)
    # Accepted for compatibility; always replaced by "pending"
    status: Optional[str] = None

    @field_validator("user_email", "court_id", "court_name", "date")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class BookingStatusUpdate(CamelModel):
    """Schema for an admin status transition."""

    status: TransitionTarget


class BookingInDB(CamelModel):
    """Schema for booking from database."""

    id: str
    court_id: str
    court_name: str
    user_email: str
    date: str
    slots: List[str]
    total_price: float
    status: BookingStatus
    created_at: datetime
