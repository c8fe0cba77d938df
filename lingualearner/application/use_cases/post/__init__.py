from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .get_post import GetPostUseCase
from .like_post import LikePostUseCase, UnlikePostUseCase, ToggleLikeUseCase
from .add_comment import AddCommentUseCase
from .update_comment import UpdateCommentUseCase
from .delete_comment import DeleteCommentUseCase
from .list_comments import ListCommentsUseCase

__all__ = [
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
