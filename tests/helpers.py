"""
Хелперы тестов, не являющиеся фикстурами.
"""

from types import SimpleNamespace

from src.application.handlers.comment_command_handler import CommentCommandHandler
from src.application.handlers.content_command_handler import ContentCommandHandler
from src.application.services.auth_service import AuthService
from src.application.services.category_service import CategoryService
from src.application.services.comment_service import CommentService
from src.application.services.content_service import ContentService
from src.application.services.file_service import FileService
from src.application.services.statistics_service import StatisticsService
from src.application.services.user_service import UserService
from src.domain.entities.user import User
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.infrastructure.config.settings import Settings
from src.infrastructure.email.email_sender import EmailSender
from src.infrastructure.persistence.category_repository_impl import CategoryRepositoryImpl
from src.infrastructure.persistence.comment_repository_impl import CommentRepositoryImpl
from src.infrastructure.persistence.content_repository_impl import ContentRepositoryImpl
from src.infrastructure.persistence.file_repository_impl import FileRepositoryImpl
from src.infrastructure.persistence.statistics_repository_impl import StatisticsRepositoryImpl
from src.infrastructure.persistence.user_repository_impl import UserRepositoryImpl
from src.infrastructure.persistence.verification_token_repository_impl import VerificationTokenRepositoryImpl
from src.infrastructure.security.jwt_session import create_access_token
from src.infrastructure.storage.local_file_storage import LocalFileStorage

TEST_PASSWORD = "secret123"


def principal_for(user: User) -> Principal:
    return Principal(user_id=user.id, role=user.role)


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


def build_services(db_session, settings: Settings) -> SimpleNamespace:
    """Собрать сервисы так же, как это делает DI FastAPI."""
    statistics = StatisticsService(StatisticsRepositoryImpl(db_session))
    users = UserRepositoryImpl(db_session)
    categories = CategoryRepositoryImpl(db_session)
    comments = CommentRepositoryImpl(db_session)
    repositories = {kind: ContentRepositoryImpl(db_session, kind) for kind in ContentKind}

    return SimpleNamespace(
        statistics=statistics,
        repositories=repositories,
        content=ContentService(ContentCommandHandler(repositories, users, categories), statistics),
        comments=CommentService(comments, CommentCommandHandler(comments, users, repositories)),
        users=UserService(users, statistics),
        categories=CategoryService(categories),
        auth=AuthService(
            users,
            VerificationTokenRepositoryImpl(db_session),
            EmailSender(settings),
            statistics,
            settings,
        ),
        files=FileService(FileRepositoryImpl(db_session), LocalFileStorage(settings), settings),
    )
