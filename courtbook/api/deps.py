"""Request-scoped dependencies: authorization and service wiring."""
from typing import Optional

from fastapi import Cookie, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.core.config import settings
from courtbook.core.database import get_db
from courtbook.models.user import User
from courtbook.repositories import (
    BookingRepository,
    CouponRepository,
    CourtRepository,
    PaymentRepository,
    UserRepository,
)
from courtbook.services.auth import (
    AuthorizationGate,
    Identity,
    IdentityVerifier,
    extract_token,
    identity_verifier,
)
from courtbook.services.booking_service import BookingService
from courtbook.services.coupon_service import CouponService
from courtbook.services.payment_processor import StripePaymentProcessor, payment_processor
from courtbook.services.payment_service import PaymentService
from courtbook.services.role_escalation import RoleEscalation
from courtbook.services.user_service import UserService


def get_identity_verifier() -> IdentityVerifier:
    return identity_verifier


def get_payment_processor() -> StripePaymentProcessor:
    return payment_processor


def get_gate(
    db: AsyncSession = Depends(get_db),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> AuthorizationGate:
    return AuthorizationGate(UserRepository(db), verifier)


async def get_current_identity(
    authorization: Optional[str] = Header(default=None),
    token: Optional[str] = Cookie(default=None),
    gate: AuthorizationGate = Depends(get_gate),
) -> Identity:
    """Verified caller, or 401."""
    return await gate.authenticate(extract_token(authorization, token))


async def require_admin(
    identity: Identity = Depends(get_current_identity),
    gate: AuthorizationGate = Depends(get_gate),
) -> User:
    """Caller's user record if they are an admin, else 401/403."""
    return await gate.require_admin(identity)


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        BookingRepository(db),
        CourtRepository(db),
        RoleEscalation(UserRepository(db)),
        enforce_transitions=settings.ENFORCE_BOOKING_TRANSITIONS,
    )


def get_payment_service(db: AsyncSession = Depends(get_db)) -> PaymentService:
    return PaymentService(PaymentRepository(db), BookingRepository(db))


def get_coupon_service(db: AsyncSession = Depends(get_db)) -> CouponService:
    return CouponService(CouponRepository(db))


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db), CourtRepository(db))
