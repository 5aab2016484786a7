"""
CQRS Query: ListThreadQuery

Запрос ветки комментариев к одному контенту.
"""

from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects.comment_target import CommentTarget


@dataclass(frozen=True)
class ListThreadQuery:
    """
    Ветка по дискриминатору.

    approved=True (по умолчанию): только одобренные, открыто всем;
    False или None (все): только для модератора.
    """

    target: CommentTarget
    approved: Optional[bool] = True
