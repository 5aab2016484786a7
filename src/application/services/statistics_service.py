"""
Application Service для агрегированной статистики.
"""

import logging
from typing import Optional

from src.domain.entities.statistics import Statistics
from src.domain.repositories.statistics_repository import IStatisticsRepository
from src.shared.exceptions.infrastructure_exceptions import InfrastructureException

logger = logging.getLogger(__name__)


class StatisticsService:
    """
    Пересчёт и чтение единственной строки статистики.

    Пересчёт всегда полный (COUNT/SUM по таблицам), поэтому
    повторные и конкурентные вызовы сходятся к одному результату.
    """

    def __init__(self, repository: IStatisticsRepository):
        self.repository = repository

    async def recompute(self) -> Statistics:
        return await self.repository.recompute()

    async def recompute_best_effort(self) -> Optional[Statistics]:
        """
        Пересчёт после мутаций контента и пользователей.

        Ошибка БД логируется и не валит исходный запрос.
        """
        try:
            return await self.repository.recompute()
        except InfrastructureException:
            logger.exception("Statistics recompute failed")
            return None

    async def get(self) -> Statistics:
        """Текущий снимок; при первом обращении строка создаётся."""
        stats = await self.repository.get()
        if stats is None:
            stats = await self.repository.recompute()
        return stats
