# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Comment
from ....domain.models.user import User
from ....domain.exceptions import EmptyTextError, PostNotFoundError
from ....utils.datetime_utils import utc_now
from ...dto.post_dto import PostResponse
from ...mappers.post_mapper import PostMapper

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    """Use case for commenting on a post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user: User, text: Optional[str]) -> PostResponse:
        """
        Append a comment stamped with the server's current time

        Raises:
            EmptyTextError: If text is missing or blank
            PostNotFoundError: If the post does not exist
        """
        if not text or not text.strip():
            raise EmptyTextError()

        comment = Comment.create(user_id=str(user.id), text=text, created_at=utc_now())
        post = await self.post_repository.add_comment(post_id, comment)
        if post is None:
            raise PostNotFoundError()

        logger.info(f"User {user.id} commented on post {post_id}")
        return PostMapper.to_response(post)
