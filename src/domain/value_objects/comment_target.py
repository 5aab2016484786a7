"""
Value Object: CommentTarget

Куда прикреплён комментарий: статья, новость, инновация,
ответ на другой комментарий или общее обсуждение (ничего не задано).
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from src.domain.value_objects.content_kind import ContentKind
from src.shared.exceptions.domain_exceptions import DomainValidationError
from src.shared.text import blank_to_none


@dataclass(frozen=True)
class CommentTarget:
    """
    Дискриминатор ветки комментариев.

    Инварианты:
    - Не более одного из article_id / news_id / innovation_id
    - Отсутствие всех трёх означает общее обсуждение
    """

    article_id: Optional[str] = None
    news_id: Optional[str] = None
    innovation_id: Optional[str] = None
    parent_id: Optional[str] = None

    def __post_init__(self):
        for name in ("article_id", "news_id", "innovation_id", "parent_id"):
            object.__setattr__(self, name, blank_to_none(getattr(self, name)))
        self.validate()

    def validate(self) -> None:
        if len(self.content_refs()) > 1:
            raise DomainValidationError(
                "Comment may reference at most one of article, news or innovation"
            )

    def content_refs(self) -> Dict[ContentKind, str]:
        """Заданные ссылки на контент."""
        refs = {
            ContentKind.ARTICLE: self.article_id,
            ContentKind.NEWS: self.news_id,
            ContentKind.INNOVATION: self.innovation_id,
        }
        return {kind: ref for kind, ref in refs.items() if ref}

    def content_ref(self) -> Optional[Tuple[ContentKind, str]]:
        """(вид, id) связанного контента или None для общего обсуждения."""
        refs = self.content_refs()
        if not refs:
            return None
        return next(iter(refs.items()))

    @property
    def is_general_discussion(self) -> bool:
        return not self.content_refs()

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @classmethod
    def for_content(cls, kind: ContentKind, content_id: str) -> "CommentTarget":
        return cls(**{kind.comment_field: content_id})
