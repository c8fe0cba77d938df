"""Resolution of a failed author-guarded comment update into the right error."""

from ....domain.repositories.post_repository import PostRepository
from ....domain.exceptions import CommentNotFoundError, ForbiddenError, PostNotFoundError


async def raise_comment_access_error(
    post_repository: PostRepository, post_id: str, comment_id: str, action: str
) -> None:
    """
    Called after an update guarded by (comment id, author id) matched nothing.

    Raises:
        PostNotFoundError: The post does not exist
        CommentNotFoundError: The post has no such comment
        ForbiddenError: The comment exists but belongs to someone else
    """
    post = await post_repository.find_by_id(post_id)
    if post is None:
        raise PostNotFoundError()
    if post.find_comment(comment_id) is None:
        raise CommentNotFoundError()
    raise ForbiddenError(f"Not authorized to {action} this comment")
