# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import UserNotFoundError
from ...dto.user_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeleteProfileUseCase:
    """
    Hard-delete the caller's account.

    Posts are left untouched: their author snapshot keeps the old id and
    name, and outstanding tokens stop resolving to a user.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> MessageResponse:
        deleted = await self.user_repository.delete(user_id)
        if not deleted:
            raise UserNotFoundError()
        logger.info(f"Deleted user {user_id}")
        return MessageResponse(message="Profile deleted successfully")
