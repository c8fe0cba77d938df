from .auth_dto import UserRegistrationRequest, UserLoginRequest, RegistrationResponse, TokenResponse
from .user_dto import (
    MessageResponse,
    ProfileResponse,
    ProfileUpdateResponse,
    SocialLinks,
    UserCheckResponse,
    UserProfileUpdateRequest,
    UserResponse,
    UserSummary,
)
from .post_dto import (
    AuthorResponse,
    CommentDetailResponse,
    CommentListResponse,
    CommentResponse,
    CommentTextRequest,
    CommentUser,
    LikeResponse,
    LikesResponse,
    LikeToggleResponse,
    PostCreateRequest,
    PostResponse,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "RegistrationResponse",
    "TokenResponse",
    "MessageResponse",
    "ProfileResponse",
    "ProfileUpdateResponse",
    "SocialLinks",
    "UserCheckResponse",
    "UserProfileUpdateRequest",
    "UserResponse",
    "UserSummary",
    "AuthorResponse",
    "CommentDetailResponse",
    "CommentListResponse",
    "CommentResponse",
    "CommentTextRequest",
    "CommentUser",
    "LikeResponse",
    "LikesResponse",
    "LikeToggleResponse",
    "PostCreateRequest",
    "PostResponse",
]
