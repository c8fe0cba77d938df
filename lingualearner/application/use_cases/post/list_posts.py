# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ...dto.post_dto import PostResponse
from ...mappers.post_mapper import PostMapper


class ListPostsUseCase:
    """Use case for listing every post (newest first)"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self) -> List[PostResponse]:
        posts = await self.post_repository.list_all()
        return [PostMapper.to_response(post) for post in posts]
