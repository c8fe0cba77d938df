from .user import User, normalize_email
from .post import Post, AuthorSnapshot, Like, Comment

__all__ = ["User", "normalize_email", "Post", "AuthorSnapshot", "Like", "Comment"]
