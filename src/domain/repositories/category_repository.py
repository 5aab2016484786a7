"""
Repository Interface: ICategoryRepository
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.category import Category


class ICategoryRepository(ABC):
    """Порт хранилища категорий (без обновления)."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def find_all(self) -> List[Category]:
        pass

    @abstractmethod
    async def find_by_id(self, category_id: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Category]:
        pass
