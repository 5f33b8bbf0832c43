"""Database models."""
from courtbook.models.user import User
from courtbook.models.court import Court
from courtbook.models.booking import Booking
from courtbook.models.coupon import Coupon
from courtbook.models.payment import Payment

__all__ = ["User", "Court", "Booking", "Coupon", "Payment"]
