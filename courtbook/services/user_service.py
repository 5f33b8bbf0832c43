"""User accounts, roles and profiles."""
import logging
from typing import List

from courtbook.core.exceptions import NotFoundException, ValidationException
from courtbook.core.ids import is_valid_id, normalize_id, utcnow
from courtbook.models.user import User
from courtbook.repositories.court_repository import CourtRepository
from courtbook.repositories.user_repository import UserRepository
from courtbook.schemas.user import AdminProfile, MemberProfile, UserCreate, UserRegistered

logger = logging.getLogger(__name__)

ROLES = ("admin", "user", "member")


class UserService:
    """Service for user accounts."""

    def __init__(self, users: UserRepository, courts: CourtRepository):
        self.users = users
        self.courts = courts

    async def register(self, data: UserCreate) -> UserRegistered:
        """Insert a new user with the default role. Existing emails are left untouched."""
        if await self.users.get_by_email(data.email) is not None:
            return UserRegistered(inserted=False, message="User already exists")
        user = await self.users.create(
            email=data.email, name=data.name, image=data.image, role="user", created_at=utcnow()
        )
        logger.info(f"Registered user {user.email}")
        return UserRegistered(inserted=True, inserted_id=user.id)

    async def get_by_email(self, email: str) -> User:
        user = await self.users.get_by_email(email)
        if user is None:
            raise NotFoundException("User not found")
        return user

    async def list_all(self) -> List[User]:
        return await self.users.list_all()

    async def list_members(self) -> List[User]:
        return await self.users.list_by_role("member")

    async def set_role(self, user_id: str, role: str) -> None:
        """
        Explicit admin role change.

        The first promotion to member through this path also stamps
        member_since.
        """
        if role not in ROLES:
            raise ValidationException("Invalid role")
        if not is_valid_id(user_id):
            raise ValidationException("Invalid user ID")
        user = await self.users.get_by_id(normalize_id(user_id))
        if user is None:
            raise NotFoundException("User not found")

        fields = {"role": role}
        if role == "member" and user.member_since is None:
            fields["member_since"] = utcnow()
        await self.users.update_by_id(user.id, **fields)
        logger.info(f"User {user.email} role set to {role}")

    async def member_profile(self, email: str) -> MemberProfile:
        user = await self.get_by_email(email)
        return MemberProfile(
            name=user.name or "Member",
            email=user.email,
            image=user.image or "/default-user.png",
            role=user.role or "user",
            member_since=user.member_since,
        )

    async def admin_profile(self, email: str) -> AdminProfile:
        admin = await self.users.get_by_email(email)
        if admin is None:
            raise NotFoundException("Admin not found")
        return AdminProfile(
            name=admin.name or "Admin",
            email=admin.email,
            image=admin.image or "/default-admin.png",
            total_courts=await self.courts.count(),
            total_users=await self.users.count(),
            total_members=await self.users.count(User.role == "member"),
        )
