"""
User endpoints.

Profile upsert, own profile/role lookup and admin role management.
"""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_user_service
from api.middleware.auth import get_current_user, require_role
from api.middleware.request_info import get_client_origin
from shared.models import AuthenticatedUser, UserRole

from .interfaces import IUserService
from .models import (
    ProfileUpdateRequest,
    RoleResponse,
    RoleUpdateRequest,
    UpsertUserResponse,
    UserRecord,
)

router = APIRouter()


@router.get("", response_model=list[UserRecord])
async def list_users(
    _admin: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    service: IUserService = Depends(get_user_service),
) -> list[UserRecord]:
    """List all users. Admin only."""
    return await service.list_users()


@router.put("", response_model=UpsertUserResponse)
async def upsert_user(
    profile: ProfileUpdateRequest,
    request: Request,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UpsertUserResponse:
    """
    Create the caller's record on first contact, otherwise refresh the
    last-seen origin only.
    """
    return await service.upsert_profile(
        user.email,
        profile,
        origin=get_client_origin(request),
    )


@router.get("/me", response_model=UserRecord)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserRecord:
    """Get the caller's own user record."""
    return await service.get_profile(user.email)


@router.get("/me/role", response_model=RoleResponse)
async def get_my_role(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> RoleResponse:
    """Get the caller's directory role."""
    record = await service.get_profile(user.email)
    return RoleResponse(email=record.email, role=record.role)


@router.patch("/{user_id}/role", response_model=UserRecord)
async def update_user_role(
    user_id: str,
    request: RoleUpdateRequest,
    _admin: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    service: IUserService = Depends(get_user_service),
) -> UserRecord:
    """Change a user's role. Admin only."""
    return await service.update_role(user_id, request.role)
