"""
Доменная сущность: Категория (Category)
"""

from dataclasses import dataclass, field
from uuid import uuid4

from src.shared.exceptions.domain_exceptions import DomainValidationError


@dataclass
class Category:
    """Категория контента. После создания не меняется."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    slug: str = ""

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise DomainValidationError("Category name cannot be empty")
        if not self.slug or not self.slug.strip():
            raise DomainValidationError("Category slug cannot be empty")
