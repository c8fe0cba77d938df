# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import UserNotFoundError
from ....core.security import verify_access_token


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a bearer token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: str) -> User:
        """
        Get current user from JWT token

        Args:
            token: JWT access token

        Returns:
            The referenced User

        Raises:
            TokenExpiredError: If the token is past its expiry
            TokenInvalidError: If the token fails verification
            UserNotFoundError: If the account was deleted after the token was issued
        """
        user_id = verify_access_token(token)

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
