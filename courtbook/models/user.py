"""User model."""
from sqlalchemy import Column, String, DateTime
from courtbook.core.database import Base
from courtbook.core.ids import new_id, utcnow


class User(Base):
    """A registered account, keyed by the identity provider's email."""

    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=True)
    image = Column(String, nullable=True)
    role = Column(String, nullable=False, default="user")  # user, member, admin
    member_since = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
