"""
Repository Interface: ICommentRepository
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.comment import Comment
from src.domain.value_objects.content_kind import ContentKind


class ICommentRepository(ABC):
    """Порт хранилища комментариев."""

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        pass

    @abstractmethod
    async def find_all(self, approved: Optional[bool] = None) -> List[Comment]:
        """Все комментарии, новые первыми; approved=None: без фильтра."""
        pass

    @abstractmethod
    async def find_by_content(
        self,
        kind: ContentKind,
        content_id: str,
        approved: Optional[bool] = None
    ) -> List[Comment]:
        """
        Ветка комментариев к контенту, новые первыми.

        Args:
            kind: Вид контента
            content_id: ID статьи/новости/инновации
            approved: Фильтр по одобрению (None: все)
        """
        pass

    @abstractmethod
    async def find_general_posts(self) -> List[Comment]:
        """Посты общего обсуждения (без привязки и без родителя), новые первыми."""
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_ids: List[str],
        approved: Optional[bool] = None
    ) -> List[Comment]:
        """Прямые ответы на перечисленные комментарии; approved=None: без фильтра."""
        pass

    @abstractmethod
    async def set_approved(self, comment_id: str) -> Optional[Comment]:
        """Выставить approved=True. None если комментария нет."""
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: str) -> bool:
        """Атомарно likes = likes + 1. False если комментария нет."""
        pass

    @abstractmethod
    async def delete(self, comment_id: str) -> bool:
        """Удалить комментарий вместе с прямыми ответами."""
        pass
