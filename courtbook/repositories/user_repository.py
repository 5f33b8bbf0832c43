"""User data access."""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update

from courtbook.models.user import User
from courtbook.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_by_role(self, role: str) -> List[User]:
        result = await self.db.execute(select(User).where(User.role == role))
        return list(result.scalars().all())

    async def promote_to_member(self, email: str, since: datetime) -> bool:
        """Unconditionally write role=member and refresh member_since."""
        result = await self.db.execute(
            update(User)
            .where(User.email == email)
            .values(role="member", member_since=since)
        )
        await self.db.commit()
        return result.rowcount > 0
