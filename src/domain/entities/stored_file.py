"""
Доменная сущность: Загруженный файл (StoredFile)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from src.domain.value_objects.comment_target import CommentTarget
from src.shared.exceptions.domain_exceptions import DomainValidationError
from src.shared.text import blank_to_none


@dataclass
class StoredFile:
    """
    Метаданные файла на локальном диске.

    Файл может быть привязан не более чем к одному из article/news/innovation.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    original_name: str = ""
    description: Optional[str] = None
    path: str = ""
    mime_type: str = "application/octet-stream"
    size: int = 0
    uploaded_by: str = ""
    article_id: Optional[str] = None
    news_id: Optional[str] = None
    innovation_id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        for name in ("description", "article_id", "news_id", "innovation_id"):
            setattr(self, name, blank_to_none(getattr(self, name)))
        if not self.name or not self.path:
            raise DomainValidationError("File name and path are required")
        if not self.uploaded_by:
            raise DomainValidationError("File uploader is required")
        if self.size < 0:
            raise DomainValidationError("File size cannot be negative")
        CommentTarget(
            article_id=self.article_id,
            news_id=self.news_id,
            innovation_id=self.innovation_id,
        )
