from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.update_profile import UpdateProfileUseCase
from ...application.use_cases.user.delete_profile import DeleteProfileUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """Profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(user_repository=container.get(UserRepository)),
        )

        container.register_factory(
            DeleteProfileUseCase,
            lambda: DeleteProfileUseCase(user_repository=container.get(UserRepository)),
        )

        container.register_factory(
            ListUsersUseCase,
            lambda: ListUsersUseCase(user_repository=container.get(UserRepository)),
        )
