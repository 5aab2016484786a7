"""
SQLAlchemy Repository реализация для категорий.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.category import Category
from src.domain.repositories.category_repository import ICategoryRepository
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import CategoryModel

_LABEL = "Category"


class CategoryRepositoryImpl(ICategoryRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, category: Category) -> Category:
        model = CategoryModel(id=category.id, name=category.name, slug=category.slug)
        async with translate_db_errors(self.session, _LABEL):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def find_all(self) -> List[Category]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(select(CategoryModel).order_by(CategoryModel.name))
            models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def find_by_id(self, category_id: str) -> Optional[Category]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(CategoryModel, category_id)
        return self._to_entity(model) if model else None

    async def find_by_slug(self, slug: str) -> Optional[Category]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                select(CategoryModel).where(CategoryModel.slug == slug)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    def _to_entity(self, model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name, slug=model.slug)
