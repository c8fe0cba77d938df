from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    UpdateProfileUseCase,
    DeleteProfileUseCase,
)
from .post import (
    CreatePostUseCase,
    ListPostsUseCase,
    GetPostUseCase,
    LikePostUseCase,
    UnlikePostUseCase,
    ToggleLikeUseCase,
    AddCommentUseCase,
    UpdateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "UpdateProfileUseCase",
    "DeleteProfileUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "LikePostUseCase",
    "UnlikePostUseCase",
    "ToggleLikeUseCase",
    "AddCommentUseCase",
    "UpdateCommentUseCase",
    "DeleteCommentUseCase",
    "ListCommentsUseCase",
]
