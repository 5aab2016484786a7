# -*- coding: utf-8 -*-
"""
Command Handler для контента (статьи, новости, инновации).
"""

import logging
from typing import Any, Dict

from src.application.commands.create_content_command import CreateContentCommand
from src.domain.entities.content import ContentItem, ContentRecord, content_class
from src.domain.policies import publishing_policy as policy
from src.domain.repositories.category_repository import ICategoryRepository
from src.domain.repositories.content_repository import IContentRepository
from src.domain.repositories.user_repository import IUserRepository
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class ContentCommandHandler:
    """Handler для команд работы с контентом."""

    def __init__(
        self,
        repositories: Dict[ContentKind, IContentRepository],
        users: IUserRepository,
        categories: ICategoryRepository
    ):
        self.repositories = repositories
        self.users = users
        self.categories = categories

    def repository(self, kind: ContentKind) -> IContentRepository:
        return self.repositories[ContentKind(kind)]

    async def handle_create_content(
        self,
        command: CreateContentCommand,
        actor: Principal
    ) -> ContentRecord:
        """
        Обработка команды создания контента.

        Args:
            command: Команда создания
            actor: Кто создаёт

        Returns:
            Созданная запись

        Raises:
            ForbiddenError: Роль не может создавать контент
            DomainValidationError: Невалидные поля или несуществующие ссылки
            DuplicateEntityError: slug уже занят
        """
        policy.ensure_can_create_content(actor.role)

        # Итоговый published решает политика, а не клиент
        published = policy.resolve_initial_published(actor.role, command.published)

        author_id = policy.resolve_author(actor.role, actor.user_id, command.author_id)

        entity_class = content_class(command.kind)
        item = entity_class(**command.entity_fields(author_id), published=published)

        await self._ensure_references(item)

        repository = self.repository(command.kind)
        if await repository.exists_by_slug(item.slug):
            raise DuplicateEntityError(f"{command.kind.display_name} with slug {item.slug} already exists")

        saved = await repository.save(item)
        logger.info(
            f"Created {command.kind.value} {saved.id} by {actor.role.value} "
            f"(published={saved.published})"
        )
        return saved

    async def handle_publish(
        self,
        kind: ContentKind,
        item_id: str,
        actor: Principal
    ) -> ContentRecord:
        """Опубликовать запись. Повторная публикация: успешный no-op."""
        policy.ensure_can_publish(actor.role)

        repository = self.repository(kind)
        item = await repository.find_by_id(item_id)
        if not item:
            raise EntityNotFoundError(f"{ContentKind(kind).display_name} not found")

        changed = item.publish()
        updated = await repository.update(item)
        if updated is None:
            raise EntityNotFoundError(f"{ContentKind(kind).display_name} not found")

        if changed:
            logger.info(f"Published {ContentKind(kind).value} {item_id}")
        return updated

    async def handle_update(
        self,
        kind: ContentKind,
        item_id: str,
        changes: Dict[str, Any],
        actor: Principal
    ) -> ContentRecord:
        """
        Частичное обновление (PATCH).

        published=True проходит через политику публикации;
        published=False игнорируется: снятия с публикации нет.
        """
        policy.ensure_can_create_content(actor.role)

        changes = dict(changes)
        wants_publish = changes.pop("published", None) is True
        if wants_publish:
            policy.ensure_can_publish(actor.role)

        repository = self.repository(kind)
        item = await repository.find_by_id(item_id)
        if not item:
            raise EntityNotFoundError(f"{ContentKind(kind).display_name} not found")

        new_slug = changes.get("slug")
        if new_slug and new_slug != item.slug and await repository.exists_by_slug(new_slug):
            raise DuplicateEntityError(f"{ContentKind(kind).display_name} with slug {new_slug} already exists")

        item.apply_changes(changes)
        await self._ensure_references(item)
        if wants_publish:
            item.publish()

        updated = await repository.update(item)
        if updated is None:
            raise EntityNotFoundError(f"{ContentKind(kind).display_name} not found")
        return updated

    async def _ensure_references(self, item: ContentItem) -> None:
        if not await self.users.find_by_id(item.author_id):
            raise DomainValidationError("Author not found")
        if item.category_id and not await self.categories.find_by_id(item.category_id):
            raise DomainValidationError("Category not found")
