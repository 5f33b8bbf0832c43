"""Promotion of users to member when one of their bookings is approved."""
import logging

from courtbook.core.ids import utcnow
from courtbook.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class RoleEscalation:
    """Promotes a booking's owner to member."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def escalate(self, email: str) -> bool:
        """
        Promote the user with ``email`` to member.

        Admins keep their role. An unknown email is not an error: approvals
        must not fail because the booking's email has no account. Role and
        member_since are rewritten on every call, so repeated approvals leave
        the user a member with a refreshed member_since.

        Returns:
            True if the user was promoted
        """
        user = await self.users.get_by_email(email)
        if user is None:
            logger.info(f"No account for {email}; skipping member promotion")
            return False
        if user.role == "admin":
            return False

        # Read-then-write without compare-and-swap; the written value is idempotent
        await self.users.promote_to_member(email, utcnow())
        logger.info(f"Promoted {email} to member")
        return True
