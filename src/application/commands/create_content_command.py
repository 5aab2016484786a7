"""
CQRS Command: CreateContentCommand

Команда для создания статьи, новости или инновации.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.domain.value_objects.content_kind import ContentKind


_KIND_FIELDS = {
    ContentKind.ARTICLE: (
        "title", "slug", "excerpt", "content", "image", "category_id", "author_id", "read_time",
    ),
    ContentKind.NEWS: (
        "title", "slug", "content", "image", "category_id", "author_id",
    ),
    ContentKind.INNOVATION: (
        "title", "slug", "description", "content", "image", "category_id", "author_id",
    ),
}


@dataclass(frozen=True)
class CreateContentCommand:
    """
    Команда создания контента.

    Иммутабельна (frozen=True) - следует принципу CQRS.
    published: пожелание клиента; итоговое значение решает политика публикации.
    """

    # Required
    kind: ContentKind
    title: str
    slug: str

    # Optional
    author_id: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[str] = None
    read_time: Optional[str] = None
    published: Optional[bool] = None

    def __post_init__(self):
        object.__setattr__(self, "kind", ContentKind(self.kind))

    def entity_fields(self, author_id: str) -> Dict[str, Any]:
        """Поля, относящиеся к виду контента, для конструктора сущности."""
        values = {name: getattr(self, name) for name in _KIND_FIELDS[self.kind]}
        values["author_id"] = author_id
        if self.kind == ContentKind.ARTICLE:
            values["excerpt"] = values.get("excerpt") or ""
        if self.kind == ContentKind.INNOVATION:
            values["description"] = values.get("description") or ""
        return values
