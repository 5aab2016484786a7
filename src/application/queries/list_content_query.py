"""
CQRS Query: ListContentQuery

Запрос списка статей, новостей или инноваций.
"""

from dataclasses import dataclass
from typing import Optional

from src.domain.value_objects.content_kind import ContentKind


@dataclass(frozen=True)
class ListContentQuery:
    """Запрос списка с фильтрами, новые первыми."""

    kind: ContentKind
    published: Optional[bool] = None
    author_id: Optional[str] = None
    category_id: Optional[str] = None
    limit: Optional[int] = None
    offset: int = 0
