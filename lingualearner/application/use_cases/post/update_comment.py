# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import COMMENT_MAX_LENGTH
from ....domain.models.user import User
from ....domain.exceptions import EmptyTextError, ValidationError
from ...dto.post_dto import PostResponse
from ...mappers.post_mapper import PostMapper
from .comment_access import raise_comment_access_error

logger = logging.getLogger(__name__)


class UpdateCommentUseCase:
    """Use case for editing a comment; only its author may do so"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(
        self, post_id: str, comment_id: str, user: User, text: Optional[str]
    ) -> PostResponse:
        """
        Replace the comment's text. The original ``created_at`` is kept.

        Raises:
            EmptyTextError: If the new text is missing or blank
            PostNotFoundError / CommentNotFoundError: If either ID does not resolve
            ForbiddenError: If the caller did not write the comment
        """
        text = (text or "").strip()
        if not text:
            raise EmptyTextError("Updated comment text is required")
        if len(text) > COMMENT_MAX_LENGTH:
            raise ValidationError("Comment cannot exceed 1000 characters")

        post = await self.post_repository.update_comment_text(post_id, comment_id, str(user.id), text)
        if post is None:
            await raise_comment_access_error(self.post_repository, post_id, comment_id, "edit")

        logger.info(f"User {user.id} edited comment {comment_id} on post {post_id}")
        return PostMapper.to_response(post)
