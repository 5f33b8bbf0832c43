"""
Domain exceptions.

Services raise these; the API layer maps each kind to a status code and a
short message. Nothing here carries storage or processor internals.
"""
from typing import Any, Dict, Optional

from fastapi import status


class DomainException(Exception):
    """Base exception for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.extra = extra or {}
        super().__init__(message)

    def to_body(self) -> Dict[str, Any]:
        return {**self.extra, "error": self.message}


class ValidationException(DomainException):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthenticatedException(DomainException):
    """No credential, or one the identity provider rejects."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenException(DomainException):
    """Valid identity without the required role."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundException(DomainException):
    """Referenced entity is absent."""

    status_code = status.HTTP_404_NOT_FOUND


class CouponExpiredException(ValidationException):
    """Coupon exists but its expiry has passed."""


class InternalException(DomainException):
    """Storage or collaborator failure."""
