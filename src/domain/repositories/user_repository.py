"""
Repository Interface: IUserRepository
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.user import User


class IUserRepository(ABC):
    """Порт хранилища пользователей."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Сохранить нового пользователя.

        Raises:
            DuplicateEntityError: email уже занят
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        pass
