# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse
from ...mappers.user_mapper import UserMapper


class ListUsersUseCase:
    """Directory of every registered account, without password hashes"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        users = await self.user_repository.list_all()
        return [UserMapper.to_response(user) for user in users]
