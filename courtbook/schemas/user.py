"""User schemas."""
from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from courtbook.schemas.base import CamelModel

Role = Literal["user", "member", "admin"]


class UserCreate(CamelModel):
    """Schema for registering a user."""

    email: str = Field(min_length=3)
    name: Optional[str] = None
    image: Optional[str] = None


class UserInDB(CamelModel):
    """Schema for user from database."""

    id: str
    email: str
    name: Optional[str] = None
    image: Optional[str] = None
    role: Role
    member_since: Optional[datetime] = None
    created_at: Optional[datetime] = None


class UserRegistered(CamelModel):
    """Schema for the outcome of a registration."""

    inserted: bool
    inserted_id: Optional[str] = None
    message: Optional[str] = None


class RoleUpdate(CamelModel):
    """Schema for an admin role change."""

    role: Role


class RoleResponse(CamelModel):
    role: Role


class MemberProfile(CamelModel):
    """Schema for a member's profile card."""

    name: str
    email: str
    image: str
    role: Role
    member_since: Optional[datetime] = None


class AdminProfile(CamelModel):
    """Schema for the admin dashboard profile."""

    name: str
    email: str
    image: str
    total_courts: int
    total_users: int
    total_members: int
