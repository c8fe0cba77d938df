# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import ValidationError
from .user import is_http_url

TITLE_MAX_LENGTH = 200
COMMENT_MAX_LENGTH = 1000


@dataclass(frozen=True)
class AuthorSnapshot:
    """
    Author id and name copied onto the post when it is created.

    Never joined back to the users collection: a later rename or account
    deletion leaves the snapshot unchanged.
    """
    id: str
    name: str


@dataclass(frozen=True)
class Like:
    user_id: str
    name: str


@dataclass
class Comment:
    """
    Embedded comment; ``created_at`` is set once by the server.

    The constructor only holds data so stored comments always load. New
    comments go through ``create()``, which enforces the text rules.
    """
    id: Optional[str]
    user_id: str
    text: str
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, user_id: str, text: Optional[str], created_at: datetime) -> "Comment":
        """
        Build a new, validated comment

        Raises:
            ValidationError: If the text is blank or longer than 1000 characters
        """
        comment = cls(id=None, user_id=str(user_id), text=(text or "").strip(), created_at=created_at)
        comment.validate()
        return comment

    def validate(self) -> None:
        if not self.text:
            raise ValidationError("Comment text is required")
        if len(self.text) > COMMENT_MAX_LENGTH:
            raise ValidationError("Comment cannot exceed 1000 characters")


@dataclass
class Post:
    """
    Pure domain model for Post entity - no external dependencies.

    ``likes`` holds at most one entry per user id; user ids are always
    compared in their string form. Business rules apply when a post is
    written (``create()``), not when a stored post is loaded.
    """
    id: Optional[str]
    title: str
    content: str
    author: AuthorSnapshot
    img: Optional[str] = None
    likes: List[Like] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls, title: Optional[str], content: Optional[str], author: AuthorSnapshot, img: Optional[str] = None
    ) -> "Post":
        """
        Build a new, validated post

        Raises:
            ValidationError: If title or content is missing, the title is too long or img is not a URL
        """
        post = cls(
            id=None,
            title=(title or "").strip(),
            content=(content or "").strip(),
            author=author,
            img=img or None,
        )
        post.validate()
        return post

    def validate(self) -> None:
        """Business validations"""
        if not self.title or not self.content:
            raise ValidationError("Title and content are required")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise ValidationError("Title cannot exceed 200 characters")
        if self.img and not is_http_url(self.img):
            raise ValidationError("Image URL must be a valid URL")

    def is_liked_by(self, user_id: str) -> bool:
        return any(like.user_id == str(user_id) for like in self.likes)

    def find_comment(self, comment_id: str) -> Optional[Comment]:
        return next((c for c in self.comments if c.id == str(comment_id)), None)
