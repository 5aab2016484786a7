"""
Доменная сущность: Сводная статистика (Statistics)

Денормализованный снимок, который целиком пересчитывается после каждой
операции, способной изменить счётчики.
"""

from dataclasses import dataclass, field
from datetime import datetime


STATISTICS_ROW_ID = "global"


@dataclass
class Statistics:
    """Единственная строка статистики."""

    id: str = STATISTICS_ROW_ID
    total_articles: int = 0
    total_news: int = 0
    total_innovations: int = 0
    total_users: int = 0
    total_views: int = 0
    updated_at: datetime = field(default_factory=datetime.utcnow)
