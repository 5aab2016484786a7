# -*- coding: utf-8 -*-
"""
Доменные сущности публикуемого контента: Article, NewsItem, Innovation.

Общий жизненный цикл:
- создаётся черновиком (published=False), если роль автора не позволяет
  публиковать сразу (см. src/domain/policies/publishing_policy.py)
- переходит в published=True один раз, явным действием администратора
- обратного перехода (снятие с публикации, архив) нет
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, Union
from uuid import uuid4

from src.domain.value_objects.content_kind import ContentKind
from src.shared.exceptions.domain_exceptions import DomainValidationError
from src.shared.text import blank_to_none


DEFAULT_READ_TIME = "5 daqiqa"


@dataclass
class ContentItem:
    """
    Базовая сущность контента.

    Инварианты:
    - Заголовок не пустой (max 500 символов)
    - Slug не пустой и без пробелов
    - Автор обязателен
    - Необязательные ссылки (image, category_id): None вместо пустых строк
    """

    kind: ClassVar[ContentKind]
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "title", "slug", "content", "image", "category_id",
    )
    OPTIONAL_REFS: ClassVar[Tuple[str, ...]] = ("image", "category_id")

    # =========================================================================
    # Идентификация
    # =========================================================================
    id: str = field(default_factory=lambda: str(uuid4()))

    # =========================================================================
    # Основные атрибуты
    # =========================================================================
    title: str = ""
    slug: str = ""
    content: Optional[str] = None
    image: Optional[str] = None
    category_id: Optional[str] = None
    author_id: str = ""

    # =========================================================================
    # Публикация и метаданные
    # =========================================================================
    published: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        for name in self.OPTIONAL_REFS:
            setattr(self, name, blank_to_none(getattr(self, name)))
        self.published = bool(self.published)
        self.validate()

    def validate(self) -> None:
        """
        Проверка инвариантов сущности.

        Исключения:
            DomainValidationError: Если инварианты нарушены
        """
        label = self.kind.display_name
        if not self.title or not self.title.strip():
            raise DomainValidationError(f"{label} title cannot be empty")
        if len(self.title) > 500:
            raise DomainValidationError(f"{label} title too long (max 500 chars)")
        if not self.slug or not self.slug.strip():
            raise DomainValidationError(f"{label} slug cannot be empty")
        if any(ch.isspace() for ch in self.slug):
            raise DomainValidationError(f"{label} slug cannot contain whitespace")
        if not self.author_id:
            raise DomainValidationError(f"{label} author is required")

    # =========================================================================
    # Бизнес-логика
    # =========================================================================

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def publish(self) -> bool:
        """
        Опубликовать. Повторный вызов: успешный no-op.

        Возвращает:
            True если статус изменился
        """
        changed = not self.published
        self.published = True
        self.touch()
        return changed

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """
        Частичное обновление редактируемых полей (PATCH).

        Поле published здесь не обрабатывается: публикация идёт через
        publish() и политику публикации.
        """
        for name, value in changes.items():
            if name not in self.EDITABLE_FIELDS:
                continue
            if name in self.OPTIONAL_REFS:
                value = blank_to_none(value)
            setattr(self, name, value)
        self.validate()
        self.touch()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentItem):
            return False
        return self.kind == other.kind and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, slug='{self.slug}', "
            f"published={self.published})"
        )


@dataclass(eq=False, repr=False)
class Article(ContentItem):
    """Статья: с анонсом, счётчиком просмотров и временем чтения."""

    kind: ClassVar[ContentKind] = ContentKind.ARTICLE
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ContentItem.EDITABLE_FIELDS + (
        "excerpt", "read_time",
    )

    excerpt: str = ""
    views: int = 0
    read_time: str = DEFAULT_READ_TIME

    def __post_init__(self):
        self.read_time = self.read_time or DEFAULT_READ_TIME
        super().__post_init__()

    def validate(self) -> None:
        super().validate()
        if not self.excerpt or not self.excerpt.strip():
            raise DomainValidationError("Article excerpt cannot be empty")
        if not self.content or not self.content.strip():
            raise DomainValidationError("Article content cannot be empty")
        if self.views < 0:
            raise DomainValidationError("Article views cannot be negative")


@dataclass(eq=False, repr=False)
class NewsItem(ContentItem):
    """Новость. Текст необязателен."""

    kind: ClassVar[ContentKind] = ContentKind.NEWS
    OPTIONAL_REFS: ClassVar[Tuple[str, ...]] = ("content", "image", "category_id")


@dataclass(eq=False, repr=False)
class Innovation(ContentItem):
    """Инновация (идея): с описанием и счётчиком лайков."""

    kind: ClassVar[ContentKind] = ContentKind.INNOVATION
    EDITABLE_FIELDS: ClassVar[Tuple[str, ...]] = ContentItem.EDITABLE_FIELDS + (
        "description",
    )
    OPTIONAL_REFS: ClassVar[Tuple[str, ...]] = ("content", "image", "category_id")

    description: str = ""
    likes: int = 0

    def validate(self) -> None:
        super().validate()
        if not self.description or not self.description.strip():
            raise DomainValidationError("Innovation description cannot be empty")
        if self.likes < 0:
            raise DomainValidationError("Innovation likes cannot be negative")


ContentRecord = Union[Article, NewsItem, Innovation]

CONTENT_CLASSES: Dict[ContentKind, Type[ContentItem]] = {
    ContentKind.ARTICLE: Article,
    ContentKind.NEWS: NewsItem,
    ContentKind.INNOVATION: Innovation,
}


def content_class(kind: ContentKind) -> Type[ContentItem]:
    return CONTENT_CLASSES[ContentKind(kind)]
