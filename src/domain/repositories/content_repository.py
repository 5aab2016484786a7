"""
Repository Interface: IContentRepository

Порт для работы с хранилищем статей, новостей и инноваций.
Реализация параметризуется видом контента (ContentKind).
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.content import ContentRecord
from src.domain.value_objects.content_kind import ContentKind


class IContentRepository(ABC):
    """
    Интерфейс репозитория контента.

    Следует Repository Pattern и является портом в Hexagonal Architecture.
    """

    kind: ContentKind

    @abstractmethod
    async def save(self, item: ContentRecord) -> ContentRecord:
        """
        Сохранить новую запись.

        Args:
            item: Сущность контента

        Returns:
            Сохранённая сущность

        Raises:
            DuplicateEntityError: slug уже занят
        """
        pass

    @abstractmethod
    async def update(self, item: ContentRecord) -> Optional[ContentRecord]:
        """
        Сохранить изменения существующей записи.

        Returns:
            Обновлённая сущность или None, если записи нет
        """
        pass

    @abstractmethod
    async def find_by_id(self, item_id: str) -> Optional[ContentRecord]:
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[ContentRecord]:
        pass

    @abstractmethod
    async def find_all(
        self,
        published: Optional[bool] = None,
        author_id: Optional[str] = None,
        category_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[ContentRecord]:
        """
        Получить список с фильтрацией, новые первыми.

        Args:
            published: Фильтр по статусу публикации (None: все)
            author_id: Фильтр по автору
            category_id: Фильтр по категории
            limit: Лимит записей (None: без лимита)
            offset: Смещение

        Returns:
            Список записей
        """
        pass

    @abstractmethod
    async def exists_by_slug(self, slug: str) -> bool:
        pass

    @abstractmethod
    async def delete(self, item_id: str) -> bool:
        """
        Удалить запись.

        Returns:
            True если запись существовала и удалена
        """
        pass

    @abstractmethod
    async def increment_counter(self, item_id: str) -> bool:
        """
        Атомарно увеличить счётчик на 1 (views для статей, likes для инноваций).

        Выполняется как `counter = counter + 1` на стороне БД.

        Returns:
            True если запись найдена
        """
        pass
