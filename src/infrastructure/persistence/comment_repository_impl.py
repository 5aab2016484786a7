# -*- coding: utf-8 -*-
"""
SQLAlchemy Repository реализация для комментариев.
"""

from typing import List, Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.comment import Comment
from src.domain.repositories.comment_repository import ICommentRepository
from src.domain.value_objects.content_kind import ContentKind
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import CommentModel

_LABEL = "Comment"


class CommentRepositoryImpl(ICommentRepository):
    """Реализация repository комментариев."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, comment: Comment) -> Comment:
        model = self._to_model(comment)
        async with translate_db_errors(self.session, _LABEL):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(CommentModel, comment_id, populate_existing=True)
        return self._to_entity(model) if model else None

    async def find_all(self, approved: Optional[bool] = None) -> List[Comment]:
        query = select(CommentModel)
        if approved is not None:
            query = query.where(CommentModel.approved == approved)
        return await self._fetch(query.order_by(CommentModel.created_at.desc()))

    async def find_by_content(
        self,
        kind: ContentKind,
        content_id: str,
        approved: Optional[bool] = None
    ) -> List[Comment]:
        """Ветка комментариев к контенту, новые первыми."""
        column = getattr(CommentModel, ContentKind(kind).comment_field)
        query = select(CommentModel).where(column == content_id)
        if approved is not None:
            query = query.where(CommentModel.approved == approved)
        return await self._fetch(query.order_by(CommentModel.created_at.desc()))

    async def find_general_posts(self) -> List[Comment]:
        query = (
            select(CommentModel)
            .where(
                CommentModel.article_id.is_(None),
                CommentModel.news_id.is_(None),
                CommentModel.innovation_id.is_(None),
                CommentModel.parent_id.is_(None),
            )
            .order_by(CommentModel.created_at.desc())
        )
        return await self._fetch(query)

    async def find_replies(
        self,
        parent_ids: List[str],
        approved: Optional[bool] = None
    ) -> List[Comment]:
        """Прямые ответы, в порядке создания."""
        if not parent_ids:
            return []
        query = select(CommentModel).where(CommentModel.parent_id.in_(parent_ids))
        if approved is not None:
            query = query.where(CommentModel.approved == approved)
        return await self._fetch(query.order_by(CommentModel.created_at.asc()))

    async def set_approved(self, comment_id: str) -> Optional[Comment]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(CommentModel, comment_id)
            if model is None:
                return None
            model.approved = True
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def increment_likes(self, comment_id: str) -> bool:
        """likes = likes + 1 одним UPDATE, без read-modify-write."""
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                update(CommentModel)
                .where(CommentModel.id == comment_id)
                .values(likes=CommentModel.likes + 1)
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
        return result.rowcount > 0

    async def delete(self, comment_id: str) -> bool:
        """Удалить комментарий и его прямые ответы."""
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                delete(CommentModel)
                .where(or_(CommentModel.id == comment_id, CommentModel.parent_id == comment_id))
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
        return result.rowcount > 0

    async def _fetch(self, query) -> List[Comment]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(query.execution_options(populate_existing=True))
            models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    # =========================================================================
    # Маппинг Entity ↔ Model
    # =========================================================================

    def _to_model(self, entity: Comment) -> CommentModel:
        return CommentModel(
            id=entity.id,
            content=entity.content,
            author_id=entity.author_id,
            article_id=entity.article_id,
            news_id=entity.news_id,
            innovation_id=entity.innovation_id,
            parent_id=entity.parent_id,
            likes=entity.likes,
            approved=entity.approved,
            created_at=entity.created_at,
        )

    def _to_entity(self, model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            content=model.content,
            author_id=model.author_id,
            article_id=model.article_id,
            news_id=model.news_id,
            innovation_id=model.innovation_id,
            parent_id=model.parent_id,
            likes=model.likes,
            approved=model.approved,
            created_at=model.created_at,
        )
