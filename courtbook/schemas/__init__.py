"""API schemas."""
from courtbook.schemas.base import InsertResult, SuccessResult, MessageResult
from courtbook.schemas.booking import (
    BookingCreate,
    BookingStatusUpdate,
    BookingInDB,
)
from courtbook.schemas.coupon import (
    CouponCreate,
    CouponUpdate,
    CouponInDB,
    CouponValidation,
)
from courtbook.schemas.court import CourtCreate, CourtUpdate, CourtInDB
from courtbook.schemas.payment import (
    PaymentCreate,
    PaymentInDB,
    PaymentRecorded,
    PaymentIntentCreate,
)
from courtbook.schemas.user import (
    UserCreate,
    UserInDB,
    UserRegistered,
    RoleUpdate,
    RoleResponse,
    MemberProfile,
    AdminProfile,
)

__all__ = [
    "InsertResult",
    "SuccessResult",
    "MessageResult",
    "BookingCreate",
    "BookingStatusUpdate",
    "BookingInDB",
    "CouponCreate",
    "CouponUpdate",
    "CouponInDB",
    "CouponValidation",
    "CourtCreate",
    "CourtUpdate",
    "CourtInDB",
    "PaymentCreate",
    "PaymentInDB",
    "PaymentRecorded",
    "PaymentIntentCreate",
    "UserCreate",
    "UserInDB",
    "UserRegistered",
    "RoleUpdate",
    "RoleResponse",
    "MemberProfile",
    "AdminProfile",
]
