# -*- coding: utf-8 -*-
"""
SQLAlchemy Repository реализация для сводной статистики.

Статистика не ведётся инкрементально: каждый вызов recompute() заново
считает COUNT/SUM и перезаписывает единственную строку.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.statistics import STATISTICS_ROW_ID, Statistics
from src.domain.repositories.statistics_repository import IStatisticsRepository
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import (
    ArticleModel,
    InnovationModel,
    NewsModel,
    StatisticsModel,
    UserModel,
)

_LABEL = "Statistics"

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class StatisticsRepositoryImpl(IStatisticsRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[Statistics]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(StatisticsModel, STATISTICS_ROW_ID, populate_existing=True)
        return self._to_entity(model) if model else None

    async def recompute(self) -> Statistics:
        """Полный пересчёт + атомарный upsert."""
        counts = select(
            select(func.count()).select_from(ArticleModel).scalar_subquery(),
            select(func.count()).select_from(NewsModel).scalar_subquery(),
            select(func.count()).select_from(InnovationModel).scalar_subquery(),
            select(func.count()).select_from(UserModel).scalar_subquery(),
            select(func.coalesce(func.sum(ArticleModel.views), 0)).scalar_subquery(),
        )

        async with translate_db_errors(self.session, _LABEL):
            row = (await self.session.execute(counts)).one()
            values = {
                "total_articles": int(row[0]),
                "total_news": int(row[1]),
                "total_innovations": int(row[2]),
                "total_users": int(row[3]),
                "total_views": int(row[4]),
                "updated_at": datetime.utcnow(),
            }
            insert = self._insert_for_dialect()
            statement = (
                insert(StatisticsModel)
                .values(id=STATISTICS_ROW_ID, **values)
                .on_conflict_do_update(index_elements=[StatisticsModel.id], set_=values)
            )
            await self.session.execute(statement)
            await self.session.commit()

        return Statistics(id=STATISTICS_ROW_ID, **values)

    def _insert_for_dialect(self):
        dialect = self.session.get_bind().dialect.name
        try:
            return _UPSERT_DIALECTS[dialect]
        except KeyError:
            raise NotImplementedError(f"Statistics upsert is not supported for {dialect}")

    def _to_entity(self, model: StatisticsModel) -> Statistics:
        return Statistics(
            id=model.id,
            total_articles=model.total_articles,
            total_news=model.total_news,
            total_innovations=model.total_innovations,
            total_users=model.total_users,
            total_views=model.total_views,
            updated_at=model.updated_at,
        )
