"""
Application Service для регистрации, входа и профиля пользователя.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.application.commands.register_user_command import RegisterUserCommand
from src.application.services.statistics_service import StatisticsService
from src.domain.entities.user import User
from src.domain.entities.verification_token import EmailVerificationToken
from src.domain.repositories.user_repository import IUserRepository
from src.domain.repositories.verification_token_repository import IVerificationTokenRepository
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.email.email_sender import EmailSender
from src.infrastructure.security.jwt_session import create_access_token
from src.infrastructure.security.passwords import hash_password, verify_password
from src.shared.exceptions.domain_exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidCredentialsError,
)
from src.shared.exceptions.infrastructure_exceptions import ExternalServiceError
from src.shared.text import normalize_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    user: User
    access_token: str
    token_type: str = "bearer"


def ensure_allowed_email(email: str, settings: Optional[Settings] = None) -> str:
    """Нормализовать email и проверить домен (только Gmail)."""
    settings = settings or get_settings()
    email = normalize_email(email)
    if not email.endswith("@" + settings.allowed_email_domain):
        raise DomainValidationError("Faqat Gmail manzili qabul qilinadi")
    return email


def ensure_password(password: Optional[str]) -> str:
    if not password:
        raise DomainValidationError("Password cannot be empty")
    return password


class AuthService:
    """
    Регистрация, вход, подтверждение email, профиль.

    Пароли хранятся только в виде PBKDF2-хэша.
    """

    def __init__(
        self,
        users: IUserRepository,
        tokens: IVerificationTokenRepository,
        email_sender: EmailSender,
        statistics: StatisticsService,
        settings: Optional[Settings] = None
    ):
        self.users = users
        self.tokens = tokens
        self.email_sender = email_sender
        self.statistics = statistics
        self.settings = settings or get_settings()

    async def register(self, command: RegisterUserCommand) -> User:
        """
        Самостоятельная регистрация.

        Роль ограничена investor/mijoz (иное -> mijoz). Ошибка отправки
        письма логируется и не отменяет регистрацию.

        Raises:
            DomainValidationError: Невалидные данные или не Gmail
            DuplicateEntityError: Email уже занят
        """
        email = ensure_allowed_email(command.email, self.settings)
        password = ensure_password(command.password)

        if await self.users.find_by_email(email):
            raise DuplicateEntityError("Ushbu Gmail manzili allaqachon mavjud")

        role = UserRole.CLIENT
        if command.role:
            requested = str(command.role).strip().lower()
            for candidate in UserRole.self_registration_roles():
                if candidate.value == requested:
                    role = candidate

        user = await self.users.save(User(
            email=email,
            password_hash=hash_password(password),
            full_name=(command.full_name or "").strip(),
            role=role,
            email_verified=False,
        ))

        token = EmailVerificationToken.issue(user.id, self.settings.verification_token_ttl_hours)
        await self.tokens.save(token)

        try:
            await self.email_sender.send_verification_email(user.email, user.full_name, token.token)
        except ExternalServiceError as e:
            logger.error(f"Verification email to {user.email} failed: {e}")

        logger.info(f"Registered user {user.id} ({role.value})")
        await self.statistics.recompute_best_effort()
        return user

    async def login(self, email: str, password: str) -> LoginResult:
        user = await self.users.find_by_email(normalize_email(email))
        if not user or not verify_password(password or "", user.password_hash):
            raise InvalidCredentialsError("Invalid credentials")
        return LoginResult(user=user, access_token=create_access_token(user))

    async def verify_email(self, token: str) -> User:
        """
        Подтвердить email по токену. Токен одноразовый.

        Raises:
            DomainValidationError: Токен не задан, неизвестен или истёк
            EntityNotFoundError: Пользователь токена не найден
        """
        if not token:
            raise DomainValidationError("Tasdiqlash tokeni talab qilinadi")

        stored = await self.tokens.find_by_token(token)
        if not stored:
            raise DomainValidationError("Noto'g'ri yoki muddati o'tgan token")

        if stored.is_expired():
            await self.tokens.delete_by_token(token)
            raise DomainValidationError("Token muddati tugagan")

        user = await self.users.find_by_id(stored.user_id)
        if not user:
            raise EntityNotFoundError("Foydalanuvchi topilmadi")

        user.verify_email()
        updated = await self.users.update(user)
        await self.tokens.delete_by_token(token)

        logger.info(f"Email verified for user {user.id}")
        return updated or user

    async def get_user(self, user_id: str) -> User:
        user = await self.users.find_by_id(user_id)
        if not user:
            raise EntityNotFoundError("Foydalanuvchi topilmadi")
        return user

    async def update_profile(
        self,
        user_id: str,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        avatar: Optional[str] = None
    ) -> User:
        """Обновить профиль; смена email сбрасывает подтверждение."""
        user = await self.get_user(user_id)

        if full_name:
            user.change_full_name(full_name)
        if email:
            email = ensure_allowed_email(email, self.settings)
            existing = await self.users.find_by_email(email)
            if existing and existing.id != user.id:
                raise DuplicateEntityError("Bu Gmail manzili allaqachon mavjud")
            user.change_email(email)
        if avatar is not None:
            user.avatar = avatar or None

        updated = await self.users.update(user)
        if not updated:
            raise EntityNotFoundError("Foydalanuvchi topilmadi")
        return updated

    async def change_password(self, user_id: str, current_password: str, new_password: str) -> None:
        user = await self.get_user(user_id)
        if not verify_password(current_password or "", user.password_hash):
            raise InvalidCredentialsError("Joriy parol noto'g'ri")

        user.set_password_hash(hash_password(ensure_password(new_password)))
        await self.users.update(user)
        logger.info(f"Password changed for user {user.id}")
