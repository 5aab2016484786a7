"""
Application Service для категорий.
"""

import logging
from typing import List

from src.domain.entities.category import Category
from src.domain.policies import publishing_policy as policy
from src.domain.repositories.category_repository import ICategoryRepository
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class CategoryService:

    def __init__(self, repository: ICategoryRepository):
        self.repository = repository

    async def list_categories(self) -> List[Category]:
        return await self.repository.find_all()

    async def get_by_slug(self, slug: str) -> Category:
        category = await self.repository.find_by_slug(slug)
        if not category:
            raise EntityNotFoundError("Category not found")
        return category

    async def create_category(self, name: str, slug: str, actor: Principal) -> Category:
        policy.ensure_can_publish(actor.role)

        category = Category(name=(name or "").strip(), slug=(slug or "").strip())
        if await self.repository.find_by_slug(category.slug):
            raise DuplicateEntityError(f"Category with slug {category.slug} already exists")

        saved = await self.repository.save(category)
        logger.info(f"Created category {saved.slug}")
        return saved
