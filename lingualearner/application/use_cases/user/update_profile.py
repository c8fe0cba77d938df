# Standard library imports
import logging
from dataclasses import replace
from typing import Any, Dict

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import validate_password
from ....domain.exceptions import UserNotFoundError
from ....core.security import hash_password
from ...dto.user_dto import ProfileUpdateResponse, UserProfileUpdateRequest
from ...mappers.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Partial profile update.

    Only truthy fields are applied. An empty string is indistinguishable from
    an omitted field, so a bio (or any other field) cannot be cleared through
    this operation.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: UserProfileUpdateRequest) -> ProfileUpdateResponse:
        """
        Apply the provided fields to the user's profile

        Raises:
            UserNotFoundError: If the user no longer exists
            ValidationError: If a provided value is invalid
            UserAlreadyExistsError: If the new email belongs to another user
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()

        changes: Dict[str, Any] = {}
        if request.name:
            changes["name"] = request.name
        if request.email:
            changes["email"] = request.email
        if request.password:
            validate_password(request.password)
            changes["hashed_password"] = hash_password(request.password)
        if request.bio:
            changes["bio"] = request.bio
        if request.profile_picture:
            changes["profile_picture"] = request.profile_picture
        if request.social_links:
            links = dict(user.social_links)
            links.update({k: v for k, v in request.social_links.model_dump().items() if v})
            changes["social_links"] = links

        if not changes:
            return ProfileUpdateResponse(user=UserMapper.to_response(user))

        # replace() re-runs the entity validations on the merged values
        saved_user = await self.user_repository.save(replace(user, **changes))
        logger.info(f"Updated profile fields {sorted(changes)} for user {user_id}")
        return ProfileUpdateResponse(user=UserMapper.to_response(saved_user))
