# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.post_dto import CommentListResponse, CommentTextRequest, PostResponse
from ...application.use_cases.post import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from ...di.base_container import BaseContainer
from ...domain.models.user import User
from .dependencies import get_container, get_current_user


router = APIRouter(tags=["comments"])


@router.post("/{post_id}/comments", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    request: CommentTextRequest,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """Add a comment to a post and return the updated post"""
    add_comment_use_case = container.get(AddCommentUseCase)
    return await add_comment_use_case.execute(post_id=post_id, user=current_user, text=request.text)


@router.put("/{post_id}/comments/{comment_id}", response_model=PostResponse)
async def update_comment(
    post_id: str,
    comment_id: str,
    request: CommentTextRequest,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """Edit a comment; only its author may do this"""
    update_comment_use_case = container.get(UpdateCommentUseCase)
    return await update_comment_use_case.execute(
        post_id=post_id,
        comment_id=comment_id,
        user=current_user,
        text=request.text,
    )


@router.delete("/{post_id}/comments/{comment_id}", response_model=PostResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: User = Depends(get_current_user),
    container: BaseContainer = Depends(get_container),
) -> PostResponse:
    """Delete a comment; only its author may do this"""
    delete_comment_use_case = container.get(DeleteCommentUseCase)
    return await delete_comment_use_case.execute(
        post_id=post_id,
        comment_id=comment_id,
        user=current_user,
    )


@router.get("/{post_id}/comments", response_model=CommentListResponse)
async def list_comments(
    post_id: str,
    container: BaseContainer = Depends(get_container),
) -> CommentListResponse:
    """List a post's comments with each author's current name"""
    list_comments_use_case = container.get(ListCommentsUseCase)
    return await list_comments_use_case.execute(post_id)
