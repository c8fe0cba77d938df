"""Mapper for User domain -> response DTO conversion."""

from ...domain.constants import UserFields
from ...domain.models.user import User
from ..dto.user_dto import SocialLinks, UserResponse, UserSummary


class UserMapper:
    """Mapper for User domain -> DTO conversion."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """Convert a domain user to the public profile DTO (never includes the hash)."""
        links = {k: v for k, v in user.social_links.items() if k in UserFields.SOCIAL_PLATFORMS}
        return UserResponse(
            id=user.id or "",
            name=user.name,
            email=user.email,
            bio=user.bio,
            profile_picture=user.profile_picture,
            social_links=SocialLinks(**links),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_summary(user: User) -> UserSummary:
        return UserSummary(id=user.id or "", email=user.email, name=user.name)
