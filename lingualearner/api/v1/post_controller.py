# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import (
    LikesResponse,
    LikeToggleResponse,
    PostCreateRequest,
    PostResponse,
)
from ...application.use_cases.post import (
    CreatePostUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UnlikePostUseCase,
)
from ...di.base_container import BaseContainer
from ...domain.models.user import User
from .dependencies import get_container, get_current_user


router = APIRouter(tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """
    Create a new post

    Args:
        request: Post creation request
        current_user: Current authenticated user (from dependency)

    Returns:
        PostResponse with the stored post, including its author snapshot
    """
    create_post_use_case = container.get(CreatePostUseCase)
    return await create_post_use_case.execute(request=request, author=current_user)


@router.get("", response_model=List[PostResponse])
async def list_posts(container: BaseContainer = Depends(get_container)) -> List[PostResponse]:
    """List all posts, newest first"""
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """
    Get a post by ID

    Args:
        post_id: ID of the post

    Returns:
        PostResponse with post information
    """
    get_post_use_case = container.get(GetPostUseCase)
    return await get_post_use_case.execute(post_id)


@router.post("/{post_id}/like", response_model=LikesResponse)
async def like_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> LikesResponse:
    """Like a post; liking it a second time is rejected with 409"""
    like_use_case = container.get(LikePostUseCase)
    return await like_use_case.execute(post_id=post_id, user=current_user)


@router.delete("/{post_id}/like", response_model=LikesResponse)
async def unlike_post(
    post_id: str,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> LikesResponse:
    """Remove the caller's like; a no-op when there was none"""
    unlike_use_case = container.get(UnlikePostUseCase)
    return await unlike_use_case.execute(post_id=post_id, user=current_user)


@router.patch("/{post_id}/like", response_model=LikeToggleResponse)
async def toggle_like(
    post_id: str,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> LikeToggleResponse:
    """Flip the caller's like on a post"""
    toggle_use_case = container.get(ToggleLikeUseCase)
    return await toggle_use_case.execute(post_id=post_id, user=current_user)
