"""Repositories."""
from courtbook.repositories.user_repository import UserRepository
from courtbook.repositories.court_repository import CourtRepository
from courtbook.repositories.booking_repository import BookingRepository
from courtbook.repositories.coupon_repository import CouponRepository
from courtbook.repositories.payment_repository import PaymentRepository

__all__ = [
    "UserRepository",
    "CourtRepository",
    "BookingRepository",
    "CouponRepository",
    "PaymentRepository",
]
