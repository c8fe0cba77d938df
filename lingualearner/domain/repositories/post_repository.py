from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.post import Comment, Like, Post


class PostRepository(ABC):
    """
    Repository interface - defines contract for post data access.

    Every mutation on likes and comments is a single conditional update on
    one post document. A method returns the updated post, or None when its
    condition did not match (missing post, existing like, foreign comment).
    """

    @abstractmethod
    async def create(self, post: Post) -> Post:
        """Insert a new post"""
        pass

    @abstractmethod
    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Find post by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Post]:
        """All posts, newest first"""
        pass

    @abstractmethod
    async def add_like(self, post_id: str, like: Like) -> Optional[Post]:
        """Append ``like`` only if no like by the same user exists"""
        pass

    @abstractmethod
    async def remove_like(self, post_id: str, user_id: str) -> Optional[Post]:
        """Remove any like by ``user_id``; matches whenever the post exists"""
        pass

    @abstractmethod
    async def remove_existing_like(self, post_id: str, user_id: str) -> Optional[Post]:
        """Remove the like by ``user_id`` only if it is present"""
        pass

    @abstractmethod
    async def add_comment(self, post_id: str, comment: Comment) -> Optional[Post]:
        """Append a comment; the repository assigns its ID"""
        pass

    @abstractmethod
    async def update_comment_text(
        self, post_id: str, comment_id: str, author_id: str, text: str
    ) -> Optional[Post]:
        """Replace the text of a comment written by ``author_id``"""
        pass

    @abstractmethod
    async def remove_comment(self, post_id: str, comment_id: str, author_id: str) -> Optional[Post]:
        """Delete a comment written by ``author_id``"""
        pass
