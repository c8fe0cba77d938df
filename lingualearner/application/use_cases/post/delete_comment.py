# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.user import User
from ...dto.post_dto import PostResponse
from ...mappers.post_mapper import PostMapper
from .comment_access import raise_comment_access_error

logger = logging.getLogger(__name__)


class DeleteCommentUseCase:
    """Use case for deleting a comment; only its author may do so"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, comment_id: str, user: User) -> PostResponse:
        """
        Raises:
            PostNotFoundError / CommentNotFoundError: If either ID does not resolve
            ForbiddenError: If the caller did not write the comment
        """
        post = await self.post_repository.remove_comment(post_id, comment_id, str(user.id))
        if post is None:
            await raise_comment_access_error(self.post_repository, post_id, comment_id, "delete")

        logger.info(f"User {user.id} deleted comment {comment_id} on post {post_id}")
        return PostMapper.to_response(post)
