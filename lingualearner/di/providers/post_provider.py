from typing import TYPE_CHECKING
from ...domain.repositories.post_repository import PostRepository
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.post import (
    AddCommentUseCase,
    CreatePostUseCase,
    DeleteCommentUseCase,
    GetPostUseCase,
    LikePostUseCase,
    ListCommentsUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UnlikePostUseCase,
    UpdateCommentUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PostProvider:
    """Post use case provider - registers post, like and comment use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all post use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            CreatePostUseCase,
            ListPostsUseCase,
            GetPostUseCase,
            LikePostUseCase,
            UnlikePostUseCase,
            ToggleLikeUseCase,
            AddCommentUseCase,
            UpdateCommentUseCase,
            DeleteCommentUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(post_repository=container.get(PostRepository)),
            )

        container.register_factory(
            ListCommentsUseCase,
            lambda: ListCommentsUseCase(
                post_repository=container.get(PostRepository),
                user_repository=container.get(UserRepository),
            )
        )
