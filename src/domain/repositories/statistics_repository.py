"""
Repository Interface: IStatisticsRepository
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.statistics import Statistics


class IStatisticsRepository(ABC):
    """Порт хранилища сводной статистики."""

    @abstractmethod
    async def get(self) -> Optional[Statistics]:
        """Текущая строка статистики или None, если её ещё нет."""
        pass

    @abstractmethod
    async def recompute(self) -> Statistics:
        """
        Полный пересчёт и upsert единственной строки.

        COUNT по статьям/новостям/инновациям/пользователям и SUM просмотров
        статей. Upsert атомарен (INSERT ... ON CONFLICT DO UPDATE).
        """
        pass
