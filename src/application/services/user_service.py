"""
Application Service для администрирования пользователей.
"""

import logging
from typing import List, Optional

from src.application.services.auth_service import ensure_allowed_email, ensure_password
from src.application.services.statistics_service import StatisticsService
from src.domain.entities.user import User
from src.domain.policies import publishing_policy as policy
from src.domain.repositories.user_repository import IUserRepository
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.security.passwords import hash_password
from src.shared.exceptions.domain_exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)


class UserService:
    """Список, удаление и создание служебных аккаунтов (только super_admin)."""

    def __init__(self, users: IUserRepository, statistics: StatisticsService):
        self.users = users
        self.statistics = statistics

    async def list_users(self, actor: Principal) -> List[User]:
        policy.ensure_can_manage_users(actor.role)
        return await self.users.find_all()

    async def delete_user(self, user_id: str, actor: Principal) -> bool:
        policy.ensure_can_manage_users(actor.role)
        deleted = await self.users.delete(user_id)
        if deleted:
            logger.info(f"User {user_id} deleted by {actor.user_id}")
            await self.statistics.recompute_best_effort()
        return deleted

    async def create_assistant(
        self,
        actor: Principal,
        full_name: str,
        email: str,
        password: str,
        services: Optional[List[str]] = None,
        notes: Optional[str] = None
    ) -> User:
        """Создать ассистента с перечнем услуг в metadata."""
        policy.ensure_can_manage_users(actor.role)

        user = await self.create_staff_user(
            full_name=full_name,
            email=email,
            password=password,
            role=UserRole.ASSISTANT,
            metadata={"services": list(services or []), "notes": notes or ""},
        )
        return user

    async def create_staff_user(
        self,
        full_name: str,
        email: str,
        password: str,
        role: UserRole,
        metadata: Optional[dict] = None
    ) -> User:
        """
        Создать служебный аккаунт без подтверждения email.

        Используется админкой (ассистенты) и CLI (create-admin).
        """
        email = ensure_allowed_email(email)
        if await self.users.find_by_email(email):
            raise DuplicateEntityError("Bu email allaqachon mavjud")

        user = await self.users.save(User(
            email=email,
            password_hash=hash_password(ensure_password(password)),
            full_name=(full_name or "").strip(),
            role=role,
            email_verified=True,
            metadata=metadata,
        ))

        logger.info(f"Created {user.role.value} account {user.id}")
        await self.statistics.recompute_best_effort()
        return user
