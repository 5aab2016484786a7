"""
Database configuration.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker

from src.infrastructure.config.settings import get_settings, to_async_url
from src.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """
    Создать async engine.

    Пул соединений настраивается только для PostgreSQL; SQLite
    использует пул по умолчанию своего диалекта и включает проверку
    внешних ключей на каждом соединении.
    """
    url = to_async_url(database_url)
    if url.startswith("postgresql+asyncpg://"):
        kwargs.setdefault("pool_size", settings.db_pool_size)
        kwargs.setdefault("max_overflow", settings.db_max_overflow)
        kwargs.setdefault("pool_pre_ping", True)

    async_engine = create_async_engine(url, echo=echo, **kwargs)

    if url.startswith("sqlite"):
        event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return async_engine


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False
    )


engine = build_engine(settings.database_url, echo=settings.debug)

AsyncSessionLocal = build_sessionmaker(engine)


async def get_db_session() -> AsyncSession:
    """Dependency для получения DB session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_models(bind: AsyncEngine = None) -> None:
    """Создать таблицы, если их нет."""
    bind = bind or engine
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema is up to date")
