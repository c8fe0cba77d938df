# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import PostNotFoundError
from ...dto.post_dto import CommentListResponse
from ...mappers.post_mapper import PostMapper


class ListCommentsUseCase:
    """Use case for listing a post's comments with their authors' current names"""

    def __init__(self, post_repository: PostRepository, user_repository: UserRepository) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def execute(self, post_id: str) -> CommentListResponse:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError()

        names = await self.user_repository.find_names_by_ids(c.user_id for c in post.comments)
        return CommentListResponse(
            comments=[PostMapper.to_comment_detail(comment, names) for comment in post.comments]
        )
