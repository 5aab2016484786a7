"""
Общие фикстуры: SQLite-файл на тест, сервисы, HTTP-клиент.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi import Depends
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import NullPool

from src.api.dependencies import get_file_service
from src.application.services.file_service import FileService
from src.domain.entities.category import Category
from src.domain.entities.user import User
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.config.database import build_engine, build_sessionmaker, get_db_session, init_models
from src.infrastructure.config.settings import Settings
from src.infrastructure.persistence.category_repository_impl import CategoryRepositoryImpl
from src.infrastructure.persistence.file_repository_impl import FileRepositoryImpl
from src.infrastructure.persistence.user_repository_impl import UserRepositoryImpl
from src.infrastructure.security.passwords import hash_password
from src.infrastructure.storage.local_file_storage import LocalFileStorage
from src.main import app
from tests.helpers import TEST_PASSWORD, build_services


# =============================================================================
# База данных
# =============================================================================

@pytest_asyncio.fixture
async def engine(tmp_path):
    """Файловая SQLite: каждое соединение отдельное, как в проде."""
    test_engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as db_session:
        yield db_session


@pytest.fixture
def test_settings(tmp_path):
    return Settings(smtp_host="", upload_dir=str(tmp_path / "uploads"))


# =============================================================================
# Фабрики данных
# =============================================================================

@pytest.fixture
def make_user(session_factory):
    """Создать пользователя с указанной ролью."""

    async def _make(role=UserRole.EDITOR_ADMIN, email=None, password=TEST_PASSWORD, full_name="Test User"):
        async with session_factory() as db_session:
            return await UserRepositoryImpl(db_session).save(User(
                email=email or f"user-{uuid4().hex[:10]}@gmail.com",
                password_hash=hash_password(password, iterations=1000),
                full_name=full_name,
                role=role,
            ))

    return _make


@pytest.fixture
def make_category(session_factory):

    async def _make(name="Texnologiya", slug=None):
        async with session_factory() as db_session:
            return await CategoryRepositoryImpl(db_session).save(
                Category(name=name, slug=slug or f"cat-{uuid4().hex[:8]}")
            )

    return _make


@pytest.fixture
def services(session, test_settings):
    return build_services(session, test_settings)


# =============================================================================
# HTTP
# =============================================================================

@pytest_asyncio.fixture
async def client(session_factory, test_settings):
    """httpx-клиент поверх приложения с тестовой БД."""

    async def override_db_session():
        async with session_factory() as db_session:
            yield db_session

    async def override_file_service(db_session=Depends(get_db_session)):
        return FileService(FileRepositoryImpl(db_session), LocalFileStorage(test_settings), test_settings)

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_file_service] = override_file_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
