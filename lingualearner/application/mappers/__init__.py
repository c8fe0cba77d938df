from .user_mapper import UserMapper
from .post_mapper import PostMapper

__all__ = ["UserMapper", "PostMapper"]
