from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class PostCreateRequest(BaseModel):
    """DTO for post creation; required fields are checked by the domain model"""
    title: Optional[str] = None
    content: Optional[str] = None
    img: Optional[str] = None


class AuthorResponse(BaseModel):
    id: str
    name: str


class LikeResponse(BaseModel):
    user_id: str
    name: str


class CommentResponse(BaseModel):
    id: str
    user_id: str
    text: str
    created_at: Optional[datetime] = None


class PostResponse(BaseModel):
    """DTO for post response"""
    id: str
    title: str
    content: str
    img: Optional[str] = None
    author: AuthorResponse
    likes: List[LikeResponse] = []
    comments: List[CommentResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LikesResponse(BaseModel):
    message: str
    likes: List[LikeResponse]


class LikeToggleResponse(BaseModel):
    message: str = "Like updated"
    liked: bool
    post: PostResponse


class CommentTextRequest(BaseModel):
    text: Optional[str] = None


class CommentUser(BaseModel):
    id: str
    name: Optional[str] = None


class CommentDetailResponse(BaseModel):
    """Comment with its author's current name (None once the account is gone)"""
    id: str
    user: CommentUser
    text: str
    created_at: Optional[datetime] = None


class CommentListResponse(BaseModel):
    comments: List[CommentDetailResponse]
