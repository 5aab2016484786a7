# -*- coding: utf-8 -*-
"""
SQLAlchemy Repository реализация для статей, новостей и инноваций.

Один адаптер на три таблицы: вид контента задаётся при создании,
маппинг Entity ↔ Model строится по полям dataclass-сущности.
"""

from dataclasses import fields
from typing import Dict, List, Optional, Type

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.content import ContentItem, ContentRecord, content_class
from src.domain.repositories.content_repository import IContentRepository
from src.domain.value_objects.content_kind import ContentKind
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import (
    ArticleModel,
    Base,
    InnovationModel,
    NewsModel,
)
from src.shared.exceptions.domain_exceptions import DomainValidationError


CONTENT_MODELS: Dict[ContentKind, Type[Base]] = {
    ContentKind.ARTICLE: ArticleModel,
    ContentKind.NEWS: NewsModel,
    ContentKind.INNOVATION: InnovationModel,
}

# Счётчики меняются только атомарным инкрементом, не через update()
COUNTER_COLUMNS: Dict[ContentKind, Optional[str]] = {
    ContentKind.ARTICLE: "views",
    ContentKind.NEWS: None,
    ContentKind.INNOVATION: "likes",
}


class ContentRepositoryImpl(IContentRepository):
    """
    Реализация repository контента.

    Адаптер в Hexagonal Architecture.
    """

    def __init__(self, session: AsyncSession, kind: ContentKind):
        """
        Инициализация репозитория.

        Аргументы:
            session: Асинхронная сессия SQLAlchemy
            kind: Вид контента (article / news / innovation)
        """
        self.session = session
        self.kind = ContentKind(kind)
        self.model_class = CONTENT_MODELS[self.kind]
        self.entity_class: Type[ContentItem] = content_class(self.kind)
        self.counter = COUNTER_COLUMNS[self.kind]
        self._fields = [f.name for f in fields(self.entity_class)]

    @property
    def _label(self) -> str:
        return self.kind.display_name

    async def save(self, item: ContentRecord) -> ContentRecord:
        """Сохранить новую запись."""
        model = self._to_model(item)
        async with translate_db_errors(self.session, self._label):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def update(self, item: ContentRecord) -> Optional[ContentRecord]:
        """Записать изменённые поля (кроме id, created_at и счётчика)."""
        skip = {"id", "created_at", self.counter}
        async with translate_db_errors(self.session, self._label):
            model = await self.session.get(self.model_class, item.id)
            if model is None:
                return None
            for name in self._fields:
                if name not in skip:
                    setattr(model, name, getattr(item, name))
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def find_by_id(self, item_id: str) -> Optional[ContentRecord]:
        async with translate_db_errors(self.session, self._label):
            result = await self.session.execute(
                select(self.model_class)
                .where(self.model_class.id == item_id)
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[ContentRecord]:
        async with translate_db_errors(self.session, self._label):
            result = await self.session.execute(
                select(self.model_class)
                .where(self.model_class.slug == slug)
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_all(
        self,
        published: Optional[bool] = None,
        author_id: Optional[str] = None,
        category_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0
    ) -> List[ContentRecord]:
        """Получить список с фильтрацией, новые первыми."""
        model_class = self.model_class
        query = select(model_class)

        if published is not None:
            query = query.where(model_class.published == published)
        if author_id:
            query = query.where(model_class.author_id == author_id)
        if category_id:
            query = query.where(model_class.category_id == category_id)

        query = query.order_by(model_class.created_at.desc()).offset(offset)
        if limit is not None:
            query = query.limit(limit)

        async with translate_db_errors(self.session, self._label):
            result = await self.session.execute(
                query.execution_options(populate_existing=True)
            )
            models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def exists_by_slug(self, slug: str) -> bool:
        async with translate_db_errors(self.session, self._label):
            result = await self.session.execute(
                select(func.count(self.model_class.id)).where(self.model_class.slug == slug)
            )
            return result.scalar() > 0

    async def delete(self, item_id: str) -> bool:
        """Удалить запись по ID."""
        async with translate_db_errors(self.session, self._label):
            model = await self.session.get(self.model_class, item_id)
            if not model:
                return False
            await self.session.delete(model)
            await self.session.commit()
            return True

    async def increment_counter(self, item_id: str) -> bool:
        """
        Атомарный инкремент счётчика на стороне БД.

        updated_at явно оставляется как есть: просмотр или лайк
        не являются редактированием записи.
        """
        if not self.counter:
            raise DomainValidationError(f"{self._label} has no counter")

        model_class = self.model_class
        column = getattr(model_class, self.counter)
        async with translate_db_errors(self.session, self._label):
            result = await self.session.execute(
                update(model_class)
                .where(model_class.id == item_id)
                .values({column: column + 1, model_class.updated_at: model_class.updated_at})
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
        return result.rowcount > 0

    # =========================================================================
    # Маппинг Entity ↔ Model
    # =========================================================================

    def _to_model(self, entity: ContentRecord):
        return self.model_class(**{name: getattr(entity, name) for name in self._fields})

    def _to_entity(self, model) -> ContentRecord:
        return self.entity_class(**{name: getattr(model, name) for name in self._fields})
