from .update_profile import UpdateProfileUseCase
from .delete_profile import DeleteProfileUseCase
from .list_users import ListUsersUseCase

__all__ = ["UpdateProfileUseCase", "DeleteProfileUseCase", "ListUsersUseCase"]
