# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import InvalidCredentialsError
from ....core.security import verify_password, issue_access_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse
from ...mappers.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse with a fresh bearer token

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password alike
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None or not verify_password(request.password, user.hashed_password):
            logger.debug("Login rejected: invalid credentials")
            raise InvalidCredentialsError()

        token = issue_access_token(user.id or "")
        return TokenResponse(token=token, user=UserMapper.to_summary(user))
