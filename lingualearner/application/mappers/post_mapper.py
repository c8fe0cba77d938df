"""Mapper for Post domain -> response DTO conversion."""

from typing import Dict, List

from ...domain.models.post import Comment, Like, Post
from ..dto.post_dto import (
    AuthorResponse,
    CommentDetailResponse,
    CommentResponse,
    CommentUser,
    LikeResponse,
    PostResponse,
)


class PostMapper:
    """Mapper for Post domain -> DTO conversion."""

    @staticmethod
    def to_response(post: Post) -> PostResponse:
        return PostResponse(
            id=post.id or "",
            title=post.title,
            content=post.content,
            img=post.img,
            author=AuthorResponse(id=post.author.id, name=post.author.name),
            likes=PostMapper.to_like_responses(post.likes),
            comments=[
                CommentResponse(
                    id=comment.id or "",
                    user_id=comment.user_id,
                    text=comment.text,
                    created_at=comment.created_at,
                )
                for comment in post.comments
            ],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

    @staticmethod
    def to_like_responses(likes: List[Like]) -> List[LikeResponse]:
        return [LikeResponse(user_id=like.user_id, name=like.name) for like in likes]

    @staticmethod
    def to_comment_detail(comment: Comment, names: Dict[str, str]) -> CommentDetailResponse:
        return CommentDetailResponse(
            id=comment.id or "",
            user=CommentUser(id=comment.user_id, name=names.get(comment.user_id)),
            text=comment.text,
            created_at=comment.created_at,
        )
