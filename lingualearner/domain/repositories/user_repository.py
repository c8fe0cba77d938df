from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by normalized email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """All users in creation order"""
        pass

    @abstractmethod
    async def find_names_by_ids(self, user_ids: Iterable[str]) -> Dict[str, str]:
        """Map each existing user ID to its current display name"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user (create or update); raises UserAlreadyExistsError on a taken email"""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Hard-delete a user; returns False when nothing was deleted"""
        pass
