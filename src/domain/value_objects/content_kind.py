"""
Value Object: ContentKind

Тип публикуемого контента.
"""

from enum import Enum


class ContentKind(str, Enum):
    """Виды контента с жизненным циклом черновик -> опубликовано."""

    ARTICLE = "article"
    NEWS = "news"
    INNOVATION = "innovation"

    @property
    def display_name(self) -> str:
        names = {
            ContentKind.ARTICLE: "Article",
            ContentKind.NEWS: "News",
            ContentKind.INNOVATION: "Innovation",
        }
        return names[self]

    @property
    def comment_field(self) -> str:
        """Имя поля-дискриминатора в комментарии/файле."""
        return f"{self.value}_id"
