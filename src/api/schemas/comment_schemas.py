"""
Pydantic schemas для комментариев.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities.comment import Comment


class CreateCommentRequest(BaseModel):
    """
    Комментарий, ответ или пост общего обсуждения.

    Автор: текущий пользователь. Не более одного из
    article_id / news_id / innovation_id.
    """

    content: Optional[str] = None
    article_id: Optional[str] = None
    news_id: Optional[str] = None
    innovation_id: Optional[str] = None
    parent_id: Optional[str] = None


class CommentResponse(BaseModel):
    id: str
    content: str
    author_id: str
    article_id: Optional[str]
    news_id: Optional[str]
    innovation_id: Optional[str]
    parent_id: Optional[str]
    likes: int
    approved: bool
    created_at: datetime
    replies: List["CommentResponse"] = []

    @classmethod
    def from_entity(cls, entity: Comment) -> "CommentResponse":
        return cls(
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
            replies=[cls.from_entity(r) for r in entity.replies],
        )
