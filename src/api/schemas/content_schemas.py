"""
Pydantic schemas для статей, новостей и инноваций.

Все поля запросов необязательны; обязательность полей по виду контента
проверяют доменные сущности (400), а не pydantic (422).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities.content import Article, Innovation, NewsItem


class CreateContentRequest(BaseModel):
    """Запрос на создание записи любого вида."""

    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[str] = None
    author_id: Optional[str] = None
    read_time: Optional[str] = None
    published: Optional[bool] = None


class UpdateContentRequest(BaseModel):
    """PATCH: передаются только изменяемые поля."""

    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[str] = None
    read_time: Optional[str] = None
    published: Optional[bool] = None


class _ContentResponse(BaseModel):
    id: str
    title: str
    slug: str
    content: Optional[str]
    image: Optional[str]
    category_id: Optional[str]
    author_id: str
    published: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ArticleResponse(_ContentResponse):
    excerpt: str
    views: int
    read_time: str

    @classmethod
    def from_entity(cls, entity: Article) -> "ArticleResponse":
        return cls.model_validate(entity)


class NewsResponse(_ContentResponse):

    @classmethod
    def from_entity(cls, entity: NewsItem) -> "NewsResponse":
        return cls.model_validate(entity)


class InnovationResponse(_ContentResponse):
    description: str
    likes: int

    @classmethod
    def from_entity(cls, entity: Innovation) -> "InnovationResponse":
        return cls.model_validate(entity)
