"""
Интеграционные тесты пересчёта статистики.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select

from src.application.commands.create_content_command import CreateContentCommand
from src.application.services.statistics_service import StatisticsService
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.persistence.models import StatisticsModel
from src.infrastructure.persistence.statistics_repository_impl import StatisticsRepositoryImpl
from src.shared.exceptions.infrastructure_exceptions import DatabaseError
from tests.helpers import principal_for


@pytest.mark.asyncio
async def test_recompute_counts_drafts_and_published(services, make_user):
    """Тест: 3 статьи (2 опубликованы, 1 черновик) + 1 новость."""
    admin = await make_user(role=UserRole.SUPER_ADMIN)
    actor = principal_for(admin)
    for slug, published in (("a1", True), ("a2", True), ("a3", False)):
        await services.content.create_content(
            CreateContentCommand(
                kind=ContentKind.ARTICLE, title=slug, slug=slug, excerpt="e", content="c", published=published,
            ),
            actor,
        )
    await services.content.create_content(
        CreateContentCommand(kind=ContentKind.NEWS, title="n1", slug="n1"), actor
    )

    stats = await services.statistics.recompute()

    assert stats.total_articles == 3
    assert stats.total_news == 1
    assert stats.total_innovations == 0
    assert stats.total_users == 1
    assert stats.total_views == 0


@pytest.mark.asyncio
async def test_get_initialises_missing_row(services):
    stats = await services.statistics.get()
    assert stats.total_articles == 0


@pytest.mark.asyncio
async def test_concurrent_recompute_keeps_single_row(session_factory, session, make_user):
    """Тест: параллельные первые пересчёты не создают вторую строку."""
    await make_user()

    async def recompute():
        async with session_factory() as own_session:
            await StatisticsService(StatisticsRepositoryImpl(own_session)).recompute()

    await asyncio.gather(*(recompute() for _ in range(5)))

    rows = (await session.execute(select(func.count()).select_from(StatisticsModel))).scalar()
    assert rows == 1


@pytest.mark.asyncio
async def test_best_effort_swallows_database_errors(caplog):
    repository = AsyncMock()
    repository.recompute.side_effect = DatabaseError("connection lost")
    service = StatisticsService(repository)

    assert await service.recompute_best_effort() is None
    assert "Statistics recompute failed" in caplog.text
