"""
Pydantic schemas для категорий, файлов и статистики.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities.category import Category
from src.domain.entities.statistics import Statistics
from src.domain.entities.stored_file import StoredFile


class SuccessResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class CreateCategoryRequest(BaseModel):
    name: Optional[str] = None
    slug: Optional[str] = None


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str

    @classmethod
    def from_entity(cls, entity: Category) -> "CategoryResponse":
        return cls(id=entity.id, name=entity.name, slug=entity.slug)


class FileResponse(BaseModel):
    id: str
    name: str
    original_name: str
    description: Optional[str]
    path: str
    mime_type: str
    size: int
    uploaded_by: str
    article_id: Optional[str]
    news_id: Optional[str]
    innovation_id: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: StoredFile) -> "FileResponse":
        return cls.model_validate(entity)

    class Config:
        from_attributes = True


class AvatarResponse(BaseModel):
    avatar: str


class StatisticsResponse(BaseModel):
    """Снимок агрегатов платформы."""

    total_articles: int
    total_news: int
    total_innovations: int
    total_users: int
    total_views: int
    updated_at: datetime

    @classmethod
    def from_entity(cls, entity: Statistics) -> "StatisticsResponse":
        return cls(
            total_articles=entity.total_articles,
            total_news=entity.total_news,
            total_innovations=entity.total_innovations,
            total_users=entity.total_users,
            total_views=entity.total_views,
            updated_at=entity.updated_at,
        )
