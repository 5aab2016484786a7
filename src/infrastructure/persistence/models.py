# -*- coding: utf-8 -*-
"""
SQLAlchemy модели: инфраструктурный слой.

Одна схема: users, categories, articles, news, innovations, comments,
files, statistics, email_verification_tokens.

Маппинг особенностей:
- entity.metadata ↔ model.user_metadata (избегаем конфликт с SQLAlchemy)
- entity.password_hash ↔ колонка password
"""

from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime, Boolean, Integer, JSON, ForeignKey
from sqlalchemy.orm import declarative_base
import uuid

from src.domain.entities.statistics import STATISTICS_ROW_ID

Base = declarative_base()


def _uuid() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    """SQLAlchemy модель пользователя."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_uuid)
    email = Column(String(320), nullable=False, unique=True, index=True)
    password = Column(Text, nullable=False, comment="PBKDF2 хэш пароля")
    full_name = Column(Text, nullable=False)
    avatar = Column(Text)
    role = Column(String(32), nullable=False, default="user", index=True)
    email_verified = Column(Boolean, nullable=False, default=False)

    # ВАЖНО: Названо user_metadata (не metadata) чтобы не конфликтовать
    # с Base.metadata. В доменной сущности это поле называется metadata.
    user_metadata = Column("metadata", JSON, default=None)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<UserModel(id={self.id}, email='{self.email}')>"


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, unique=True)


class ArticleModel(Base):
    """SQLAlchemy модель статьи."""

    __tablename__ = "articles"

    # =========================================================================
    # Основные поля
    # =========================================================================
    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(500), nullable=False)
    slug = Column(String(500), nullable=False, unique=True, index=True)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    image = Column(Text)
    category_id = Column(String(36), ForeignKey("categories.id"), index=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # =========================================================================
    # Счётчики и публикация
    # =========================================================================
    views = Column(Integer, nullable=False, default=0)
    read_time = Column(String(50), nullable=False, default="5 daqiqa")
    published = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ArticleModel(id={self.id}, slug='{self.slug}')>"


class NewsModel(Base):
    """SQLAlchemy модель новости."""

    __tablename__ = "news"

    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(500), nullable=False)
    slug = Column(String(500), nullable=False, unique=True, index=True)
    content = Column(Text)
    image = Column(Text)
    category_id = Column(String(36), ForeignKey("categories.id"), index=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    published = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<NewsModel(id={self.id}, slug='{self.slug}')>"


class InnovationModel(Base):
    """SQLAlchemy модель инновации."""

    __tablename__ = "innovations"

    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(500), nullable=False)
    slug = Column(String(500), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    content = Column(Text)
    image = Column(Text)
    category_id = Column(String(36), ForeignKey("categories.id"), index=True)
    author_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    likes = Column(Integer, nullable=False, default=0)
    published = Column(Boolean, nullable=False, default=False, index=True)

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<InnovationModel(id={self.id}, slug='{self.slug}')>"


class CommentModel(Base):
    """
    SQLAlchemy модель комментария.

    parent_id: ссылка на саму таблицу (один уровень ответов).
    """

    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, default=_uuid)
    content = Column(Text, nullable=False)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    article_id = Column(String(36), ForeignKey("articles.id", ondelete="CASCADE"), index=True)
    news_id = Column(String(36), ForeignKey("news.id", ondelete="CASCADE"), index=True)
    innovation_id = Column(String(36), ForeignKey("innovations.id", ondelete="CASCADE"), index=True)
    parent_id = Column(String(36), ForeignKey("comments.id", ondelete="CASCADE"), index=True)
    likes = Column(Integer, nullable=False, default=0)
    approved = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class FileModel(Base):
    """SQLAlchemy модель загруженного файла."""

    __tablename__ = "files"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(Text, nullable=False)
    original_name = Column(Text, nullable=False)
    description = Column(Text)
    path = Column(Text, nullable=False)
    mime_type = Column(String(255), nullable=False)
    size = Column(Integer, nullable=False)
    uploaded_by = Column(String(36), ForeignKey("users.id"), nullable=False)
    article_id = Column(String(36), ForeignKey("articles.id", ondelete="SET NULL"))
    news_id = Column(String(36), ForeignKey("news.id", ondelete="SET NULL"))
    innovation_id = Column(String(36), ForeignKey("innovations.id", ondelete="SET NULL"))
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class StatisticsModel(Base):
    """
    Единственная строка сводной статистики.

    Фиксированный первичный ключ делает upsert атомарным:
    две параллельные первые инициализации не создадут две строки.
    """

    __tablename__ = "statistics"

    id = Column(String(36), primary_key=True, default=STATISTICS_ROW_ID)
    total_articles = Column(Integer, nullable=False, default=0)
    total_news = Column(Integer, nullable=False, default=0)
    total_innovations = Column(Integer, nullable=False, default=0)
    total_users = Column(Integer, nullable=False, default=0)
    total_views = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)


class EmailVerificationTokenModel(Base):
    __tablename__ = "email_verification_tokens"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    token = Column(String(128), nullable=False, unique=True, index=True)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
