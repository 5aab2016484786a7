"""
FastAPI Dependencies для DI.
"""

from typing import Dict, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.handlers.comment_command_handler import CommentCommandHandler
from src.application.handlers.content_command_handler import ContentCommandHandler
from src.application.services.auth_service import AuthService
from src.application.services.category_service import CategoryService
from src.application.services.comment_service import CommentService
from src.application.services.content_service import ContentService
from src.application.services.file_service import FileService
from src.application.services.statistics_service import StatisticsService
from src.application.services.user_service import UserService
from src.domain.value_objects.content_kind import ContentKind
from src.domain.value_objects.principal import Principal
from src.infrastructure.config.database import get_db_session
from src.infrastructure.email.email_sender import EmailSender
from src.infrastructure.persistence.category_repository_impl import CategoryRepositoryImpl
from src.infrastructure.persistence.comment_repository_impl import CommentRepositoryImpl
from src.infrastructure.persistence.content_repository_impl import ContentRepositoryImpl
from src.infrastructure.persistence.file_repository_impl import FileRepositoryImpl
from src.infrastructure.persistence.statistics_repository_impl import StatisticsRepositoryImpl
from src.infrastructure.persistence.user_repository_impl import UserRepositoryImpl
from src.infrastructure.persistence.verification_token_repository_impl import VerificationTokenRepositoryImpl
from src.infrastructure.security.jwt_session import principal_from_token
from src.infrastructure.storage.local_file_storage import LocalFileStorage
from src.shared.exceptions.domain_exceptions import AuthenticationRequiredError

ACCESS_TOKEN_COOKIE = "access_token"


# =============================================================================
# Principal
# =============================================================================

def _token_from_request(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(ACCESS_TOKEN_COOKIE)


async def get_optional_principal(request: Request) -> Optional[Principal]:
    """
    Principal из Bearer-заголовка или cookie access_token.

    Returns:
        Principal если токен есть; None для анонимного запроса

    Raises:
        AuthenticationRequiredError: Токен передан, но невалиден
    """
    token = _token_from_request(request)
    if not token:
        return None
    return principal_from_token(token)


async def get_current_principal(
    principal: Optional[Principal] = Depends(get_optional_principal)
) -> Principal:
    """Principal обязателен (401 иначе)."""
    if principal is None:
        raise AuthenticationRequiredError("Authentication required")
    return principal


# =============================================================================
# Repositories
# =============================================================================

async def get_user_repository(
    session: AsyncSession = Depends(get_db_session)
) -> UserRepositoryImpl:
    """DI для repository."""
    return UserRepositoryImpl(session)


async def get_content_repositories(
    session: AsyncSession = Depends(get_db_session)
) -> Dict[ContentKind, ContentRepositoryImpl]:
    """По одному repository на вид контента, в общей сессии."""
    return {kind: ContentRepositoryImpl(session, kind) for kind in ContentKind}


async def get_comment_repository(
    session: AsyncSession = Depends(get_db_session)
) -> CommentRepositoryImpl:
    return CommentRepositoryImpl(session)


async def get_category_repository(
    session: AsyncSession = Depends(get_db_session)
) -> CategoryRepositoryImpl:
    return CategoryRepositoryImpl(session)


# =============================================================================
# Services
# =============================================================================

async def get_statistics_service(
    session: AsyncSession = Depends(get_db_session)
) -> StatisticsService:
    return StatisticsService(StatisticsRepositoryImpl(session))


async def get_content_service(
    repositories: Dict[ContentKind, ContentRepositoryImpl] = Depends(get_content_repositories),
    users: UserRepositoryImpl = Depends(get_user_repository),
    categories: CategoryRepositoryImpl = Depends(get_category_repository),
    statistics: StatisticsService = Depends(get_statistics_service)
) -> ContentService:
    """DI для service."""
    command_handler = ContentCommandHandler(repositories, users, categories)
    return ContentService(command_handler, statistics)


async def get_comment_service(
    comments: CommentRepositoryImpl = Depends(get_comment_repository),
    users: UserRepositoryImpl = Depends(get_user_repository),
    repositories: Dict[ContentKind, ContentRepositoryImpl] = Depends(get_content_repositories)
) -> CommentService:
    command_handler = CommentCommandHandler(comments, users, repositories)
    return CommentService(comments, command_handler)


async def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    users: UserRepositoryImpl = Depends(get_user_repository),
    statistics: StatisticsService = Depends(get_statistics_service)
) -> AuthService:
    return AuthService(
        users=users,
        tokens=VerificationTokenRepositoryImpl(session),
        email_sender=EmailSender(),
        statistics=statistics,
    )


async def get_user_service(
    users: UserRepositoryImpl = Depends(get_user_repository),
    statistics: StatisticsService = Depends(get_statistics_service)
) -> UserService:
    return UserService(users, statistics)


async def get_category_service(
    categories: CategoryRepositoryImpl = Depends(get_category_repository)
) -> CategoryService:
    return CategoryService(categories)


async def get_file_service(
    session: AsyncSession = Depends(get_db_session)
) -> FileService:
    return FileService(FileRepositoryImpl(session), LocalFileStorage())
