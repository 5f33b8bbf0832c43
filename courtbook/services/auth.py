"""
Authorization gate.

Resolves a caller's identity from a bearer credential and checks roles.
Tokens are verified by an external identity provider (Firebase Auth). The
caller's role is read from the user repository on every request, so a role
change takes effect on the caller's next request.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

import firebase_admin
from firebase_admin import auth as firebase_auth, credentials
from fastapi.concurrency import run_in_threadpool

from courtbook.core.config import settings
from courtbook.core.exceptions import ForbiddenException, UnauthenticatedException
from courtbook.models.user import User
from courtbook.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """A verified caller."""

    email: str
    uid: Optional[str] = None


class IdentityVerifier(Protocol):
    async def verify(self, token: str) -> Identity:
        """Return the identity asserted by ``token`` or raise UnauthenticatedException."""
        ...


class FirebaseIdentityVerifier:
    """Verifies Firebase ID tokens with the Admin SDK."""

    def __init__(self, credentials_path: Optional[str] = None):
        self.credentials_path = credentials_path
        self._app = None

    def _get_app(self):
        if self._app is None:
            if firebase_admin._apps:
                self._app = firebase_admin.get_app()
            elif self.credentials_path:
                cred = credentials.Certificate(self.credentials_path)
                self._app = firebase_admin.initialize_app(cred)
            else:
                # Application default credentials
                self._app = firebase_admin.initialize_app()
        return self._app

    async def verify(self, token: str) -> Identity:
        app = self._get_app()
        try:
            decoded = await run_in_threadpool(firebase_auth.verify_id_token, token, app)
        except (ValueError, firebase_auth.InvalidIdTokenError, firebase_auth.UserDisabledError) as e:
            logger.info(f"Rejected identity token: {e}")
            raise UnauthenticatedException("Invalid token")

        email = decoded.get("email")
        if not email:
            raise UnauthenticatedException("Unauthorized: No email found")
        return Identity(email=email, uid=decoded.get("uid"))


def extract_token(authorization: Optional[str], cookie_token: Optional[str]) -> Optional[str]:
    """Take the credential from ``Authorization: Bearer <token>``, else the ``token`` cookie."""
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return cookie_token or None


class AuthorizationGate:
    """Identity and role checks for a single request."""

    def __init__(self, users: UserRepository, verifier: IdentityVerifier):
        self.users = users
        self.verifier = verifier

    async def authenticate(self, token: Optional[str]) -> Identity:
        if not token:
            raise UnauthenticatedException("Unauthorized")
        return await self.verifier.verify(token)

    async def require_user(self, identity: Identity) -> User:
        user = await self.users.get_by_email(identity.email)
        if user is None:
            raise UnauthenticatedException("Unauthorized: No account for this identity")
        return user

    async def require_admin(self, identity: Identity) -> User:
        user = await self.require_user(identity)
        if user.role != "admin":
            logger.info(f"Admin access denied for {identity.email} (role={user.role})")
            raise ForbiddenException("Forbidden: Admins only")
        return user

    async def require_self_or_admin(self, identity: Identity, email: str) -> User:
        """Allow access to ``email``'s data for that user or an admin."""
        user = await self.require_user(identity)
        if user.role != "admin" and identity.email != email:
            raise ForbiddenException("Forbidden: Access denied")
        return user


# Singleton instance
identity_verifier = FirebaseIdentityVerifier(settings.FIREBASE_CREDENTIALS_PATH)
