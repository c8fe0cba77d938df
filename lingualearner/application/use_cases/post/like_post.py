"""
Like / unlike / toggle use cases.

"Liked" is a binary state per (post, user). Each transition is delegated to
one conditional update in the repository; these classes only interpret a
non-match (missing post vs. state already in place). User ids are compared
as strings everywhere.
"""
# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.models.post import Like
from ....domain.models.user import User
from ....domain.exceptions import AlreadyLikedError, PostNotFoundError
from ...dto.post_dto import LikesResponse, LikeToggleResponse
from ...mappers.post_mapper import PostMapper

logger = logging.getLogger(__name__)

# Each round tries a push then a pull; a round with two misses means a
# concurrent request flipped the state in between.
MAX_TOGGLE_ROUNDS = 2


class LikePostUseCase:
    """Add the caller's like; a second like by the same user is rejected"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user: User) -> LikesResponse:
        """
        Raises:
            PostNotFoundError: If the post does not exist
            AlreadyLikedError: If the user already likes the post
        """
        like = Like(user_id=str(user.id), name=user.name)
        post = await self.post_repository.add_like(post_id, like)
        if post is None:
            if await self.post_repository.find_by_id(post_id) is None:
                raise PostNotFoundError()
            raise AlreadyLikedError()

        logger.info(f"User {user.id} liked post {post_id}")
        return LikesResponse(message="Liked!", likes=PostMapper.to_like_responses(post.likes))


class UnlikePostUseCase:
    """Remove the caller's like; succeeds even when there was none"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user: User) -> LikesResponse:
        """
        Raises:
            PostNotFoundError: If the post does not exist
        """
        post = await self.post_repository.remove_like(post_id, str(user.id))
        if post is None:
            raise PostNotFoundError()

        logger.info(f"User {user.id} unliked post {post_id}")
        return LikesResponse(message="Like removed", likes=PostMapper.to_like_responses(post.likes))


class ToggleLikeUseCase:
    """Flip the caller's like state in one request"""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, post_id: str, user: User) -> LikeToggleResponse:
        """
        Raises:
            PostNotFoundError: If the post does not exist
        """
        user_id = str(user.id)
        like = Like(user_id=user_id, name=user.name)

        for _ in range(MAX_TOGGLE_ROUNDS):
            post = await self.post_repository.add_like(post_id, like)
            if post is not None:
                return LikeToggleResponse(liked=True, post=PostMapper.to_response(post))

            post = await self.post_repository.remove_existing_like(post_id, user_id)
            if post is not None:
                return LikeToggleResponse(liked=False, post=PostMapper.to_response(post))

            if await self.post_repository.find_by_id(post_id) is None:
                raise PostNotFoundError()

        # Lost every race; report the state as it stands now
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError()
        logger.warning(f"Like toggle on post {post_id} for user {user_id} kept losing to concurrent updates")
        return LikeToggleResponse(liked=post.is_liked_by(user_id), post=PostMapper.to_response(post))
