# -*- coding: utf-8 -*-
"""
Доменная сущность: Комментарий (Comment)

Одна сущность обслуживает и ветки комментариев к статьям/новостям/
инновациям, и общую доску обсуждений (комментарий без привязки к контенту).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from src.domain.value_objects.comment_target import CommentTarget
from src.shared.exceptions.domain_exceptions import DomainValidationError
from src.shared.text import blank_to_none


@dataclass
class Comment:
    """
    Доменная сущность комментария.

    Инварианты:
    - Текст не пустой
    - Автор обязателен
    - Не более одной привязки к контенту (см. CommentTarget)
    - approved меняется только false -> true
    - Комментарии не редактируются; меняются лишь approved и likes
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    content: str = ""
    author_id: str = ""
    article_id: Optional[str] = None
    news_id: Optional[str] = None
    innovation_id: Optional[str] = None
    parent_id: Optional[str] = None
    likes: int = 0
    approved: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)

    # Ответы, прикреплённые при выдаче общего обсуждения. Не хранится.
    replies: List["Comment"] = field(default_factory=list, compare=False)

    def __post_init__(self):
        for name in ("article_id", "news_id", "innovation_id", "parent_id"):
            setattr(self, name, blank_to_none(getattr(self, name)))
        self.validate()

    def validate(self) -> None:
        if not self.content or not self.content.strip():
            raise DomainValidationError("Comment content cannot be empty")
        if not self.author_id:
            raise DomainValidationError("Comment author is required")
        self.target.validate()

    @property
    def target(self) -> CommentTarget:
        return CommentTarget(
            article_id=self.article_id,
            news_id=self.news_id,
            innovation_id=self.innovation_id,
            parent_id=self.parent_id,
        )

    @property
    def is_general_discussion(self) -> bool:
        return self.target.is_general_discussion

    # =========================================================================
    # Бизнес-логика
    # =========================================================================

    @classmethod
    def create(cls, content: str, author_id: str, target: CommentTarget) -> "Comment":
        """
        Создать комментарий по правилу автоодобрения.

        Без привязки к статье/новости/инновации (пост или ответ в общем
        обсуждении): одобрен сразу; иначе ждёт модерации.
        """
        return cls(
            content=content,
            author_id=author_id,
            article_id=target.article_id,
            news_id=target.news_id,
            innovation_id=target.innovation_id,
            parent_id=target.parent_id,
            approved=target.is_general_discussion,
        )

    def approve(self) -> bool:
        """Одобрить. Возвращает True если статус изменился."""
        changed = not self.approved
        self.approved = True
        return changed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comment):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Comment(id={self.id}, approved={self.approved}, parent={self.parent_id})"
