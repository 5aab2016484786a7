"""
Application Service для статей, новостей и инноваций.
"""

import logging
from typing import Any, Dict, List, Optional

from src.application.commands.create_content_command import CreateContentCommand
from src.application.handlers.content_command_handler import ContentCommandHandler
from src.application.queries.list_content_query import ListContentQuery
from src.application.services.statistics_service import StatisticsService
from src.domain.entities.content import ContentRecord
from src.domain.policies import publishing_policy as policy
from src.domain.repositories.content_repository import IContentRepository
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ContentService:
    """
    Application Service для контента.

    Координирует работу между handlers, repositories и статистикой.
    """

    def __init__(
        self,
        command_handler: ContentCommandHandler,
        statistics: StatisticsService
    ):
        self.command_handler = command_handler
        self.statistics = statistics

    def repository(self, kind: ContentKind) -> IContentRepository:
        return self.command_handler.repository(kind)

    # =========================================================================
    # Команды
    # =========================================================================

    async def create_content(self, command: CreateContentCommand, actor: Principal) -> ContentRecord:
        """Создать запись; черновик, если роль не публикует напрямую."""
        item = await self.command_handler.handle_create_content(command, actor)
        await self.statistics.recompute_best_effort()
        return item

    async def publish(self, kind: ContentKind, item_id: str, actor: Principal) -> ContentRecord:
        return await self.command_handler.handle_publish(kind, item_id, actor)

    async def update_content(
        self,
        kind: ContentKind,
        item_id: str,
        changes: Dict[str, Any],
        actor: Principal
    ) -> ContentRecord:
        return await self.command_handler.handle_update(kind, item_id, changes, actor)

    async def delete_content(self, kind: ContentKind, item_id: str, actor: Principal) -> bool:
        """
        Удалить запись.

        Returns:
            True если строка была удалена. Статистика пересчитывается
            только в этом случае.
        """
        policy.ensure_can_create_content(actor.role)

        deleted = await self.repository(kind).delete(item_id)
        if deleted:
            logger.info(f"Deleted {ContentKind(kind).value} {item_id} by {actor.user_id}")
            await self.statistics.recompute_best_effort()
        return deleted

    async def like_innovation(self, item_id: str) -> ContentRecord:
        """likes = likes + 1 на стороне БД."""
        repository = self.repository(ContentKind.INNOVATION)
        if not await repository.increment_counter(item_id):
            raise EntityNotFoundError("Innovation not found")
        return await repository.find_by_id(item_id)

    # =========================================================================
    # Запросы
    # =========================================================================

    async def list_content(self, query: ListContentQuery) -> List[ContentRecord]:
        return await self.repository(query.kind).find_all(
            published=query.published,
            author_id=query.author_id,
            category_id=query.category_id,
            limit=query.limit,
            offset=query.offset,
        )

    async def list_pending(self, kind: ContentKind, actor: Principal) -> List[ContentRecord]:
        """Очередь черновиков на публикацию, новые первыми."""
        policy.ensure_can_publish(actor.role)
        return await self.repository(kind).find_all(published=False)

    async def get_content(self, kind: ContentKind, item_id: str) -> ContentRecord:
        item = await self.repository(kind).find_by_id(item_id)
        return await self._on_read(kind, item)

    async def get_content_by_slug(self, kind: ContentKind, slug: str) -> ContentRecord:
        item = await self.repository(kind).find_by_slug(slug)
        return await self._on_read(kind, item)

    async def _on_read(self, kind: ContentKind, item: Optional[ContentRecord]) -> ContentRecord:
        kind = ContentKind(kind)
        if item is None:
            raise EntityNotFoundError(f"{kind.display_name} not found")
        if kind != ContentKind.ARTICLE:
            return item

        # Просмотр статьи: +1 views в БД; клиент получает запись в том виде,
        # в каком она была прочитана
        await self.repository(kind).increment_counter(item.id)
        await self.statistics.recompute_best_effort()
        return item
