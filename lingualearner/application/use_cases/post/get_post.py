# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import PostNotFoundError
from ...dto.post_dto import PostResponse
from ...mappers.post_mapper import PostMapper


class GetPostUseCase:
    """Use case for getting a post by ID"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str) -> PostResponse:
        """
        Raises:
            PostNotFoundError: If no post has this ID (or the ID is malformed)
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError()
        return PostMapper.to_response(post)
