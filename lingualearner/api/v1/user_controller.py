# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import (
    MessageResponse,
    ProfileResponse,
    ProfileUpdateResponse,
    UserCheckResponse,
    UserProfileUpdateRequest,
    UserResponse,
)
from ...application.mappers.user_mapper import UserMapper
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...application.use_cases.user.delete_profile import DeleteProfileUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...di.base_container import BaseContainer
from ...domain.models.user import User
from .dependencies import get_container, get_current_user


router = APIRouter(tags=["users"])
users_router = APIRouter(tags=["users"])


@router.get("/check", response_model=UserCheckResponse)
async def check_user(current_user: User = Depends(get_current_user)) -> UserCheckResponse:
    """Verify the bearer token and echo the authenticated user"""
    return UserCheckResponse(user=UserMapper.to_response(current_user))


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(current_user: User = Depends(get_current_user)) -> ProfileResponse:
    """
    Get current authenticated user's profile

    Args:
        current_user: Current authenticated user (from dependency)

    Returns:
        ProfileResponse wrapping the user (no password)
    """
    return ProfileResponse(user=UserMapper.to_response(current_user))


@router.put("/profile", response_model=ProfileUpdateResponse)
async def update_profile(
    request: UserProfileUpdateRequest,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> ProfileUpdateResponse:
    """
    Partially update the current user's profile

    Empty values are ignored, so a field cannot be cleared this way.
    """
    update_use_case = container.get(UpdateProfileUseCase)
    return await update_use_case.execute(user_id=current_user.id or "", request=request)


@router.delete("/profile", response_model=MessageResponse)
async def delete_profile(
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """Delete the current user's account (their posts are kept)"""
    delete_use_case = container.get(DeleteProfileUseCase)
    return await delete_use_case.execute(user_id=current_user.id or "")


@users_router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> List[UserResponse]:
    """List every registered user (authenticated; hashes are never included)"""
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()
