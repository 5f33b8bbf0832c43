"""User, role and profile endpoints."""
from typing import List
from fastapi import APIRouter, Depends

from courtbook.api.deps import get_current_identity, get_gate, get_user_service, require_admin
from courtbook.schemas import (
    AdminProfile,
    MemberProfile,
    MessageResult,
    RoleResponse,
    RoleUpdate,
    UserCreate,
    UserInDB,
    UserRegistered,
)
from courtbook.services.auth import AuthorizationGate, Identity
from courtbook.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserRegistered, response_model_exclude_none=True)
async def register_user(user: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Register a user after their first sign-in.

    Registering an email that already exists is not an error; the stored
    record is left untouched.
    """
    return await service.register(user)


@router.get("/users", response_model=List[UserInDB], dependencies=[Depends(require_admin)])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users (admin)."""
    return await service.list_all()


@router.get("/users/members", response_model=List[UserInDB], dependencies=[Depends(require_admin)])
async def list_members(service: UserService = Depends(get_user_service)):
    """List members (admin)."""
    return await service.list_members()


@router.get("/users/{email}", response_model=UserInDB)
async def get_user(
    email: str,
    identity: Identity = Depends(get_current_identity),
    gate: AuthorizationGate = Depends(get_gate),
    service: UserService = Depends(get_user_service),
):
    """Get a user by email; callers may read their own record, admins any."""
    await gate.require_self_or_admin(identity, email)
    return await service.get_by_email(email)


@router.get("/users/{email}/role", response_model=RoleResponse, dependencies=[Depends(get_current_identity)])
async def get_user_role(email: str, service: UserService = Depends(get_user_service)):
    """Get a user's role."""
    user = await service.get_by_email(email)
    return RoleResponse(role=user.role or "user")


@router.patch("/users/{user_id}/role", response_model=MessageResult, dependencies=[Depends(require_admin)])
async def update_user_role(
    user_id: str,
    update: RoleUpdate,
    service: UserService = Depends(get_user_service),
):
    """Set a user's role (admin)."""
    await service.set_role(user_id, update.role)
    return MessageResult(message=f"User role updated to {update.role}")


@router.get("/member/profile/{email}", response_model=MemberProfile, dependencies=[Depends(get_current_identity)])
async def get_member_profile(email: str, service: UserService = Depends(get_user_service)):
    """Profile card for a member."""
    return await service.member_profile(email)


@router.get("/admin/profile/{email}", response_model=AdminProfile, dependencies=[Depends(require_admin)])
async def get_admin_profile(email: str, service: UserService = Depends(get_user_service)):
    """Admin profile with platform counts."""
    return await service.admin_profile(email)
