# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User, validate_password
from ....domain.exceptions import UserAlreadyExistsError
from ....core.security import hash_password
from ...dto.auth_dto import RegistrationResponse, UserRegistrationRequest
from ...mappers.user_mapper import UserMapper

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> RegistrationResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            RegistrationResponse with created user information

        Raises:
            UserAlreadyExistsError: If user with email already exists
            ValidationError: If the user fails domain validation
        """
        # Fast path; the unique email index catches concurrent registrations
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise UserAlreadyExistsError()

        validate_password(request.password)

        # The entity only accepts a hash, so the record cannot be built unhashed
        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            hashed_password=hash_password(request.password),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return RegistrationResponse(user=UserMapper.to_response(saved_user))
