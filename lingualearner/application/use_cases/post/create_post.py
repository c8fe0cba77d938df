# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import AuthorSnapshot, Post
from ....domain.models.user import User
from ...dto.post_dto import PostCreateRequest, PostResponse
from ...mappers.post_mapper import PostMapper

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for publishing a new post"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: PostCreateRequest, author: User) -> PostResponse:
        """
        Create a post authored by ``author``

        The author's id and name are copied onto the post now and never
        refreshed afterwards.

        Raises:
            ValidationError: If title or content is missing, or img is not a URL
        """
        post = Post.create(
            title=request.title,
            content=request.content,
            img=request.img,
            author=AuthorSnapshot(id=str(author.id), name=author.name),
        )
        saved_post = await self.post_repository.create(post)
        logger.info(f"User {author.id} created post {saved_post.id}")
        return PostMapper.to_response(saved_post)
