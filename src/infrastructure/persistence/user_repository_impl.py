"""
SQLAlchemy Repository реализация для пользователей.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.domain.repositories.user_repository import IUserRepository
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import UserModel
from src.shared.text import normalize_email

_LABEL = "User"


class UserRepositoryImpl(IUserRepository):
    """Реализация repository пользователей."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, user: User) -> User:
        model = self._to_model(user)
        async with translate_db_errors(self.session, _LABEL):
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def update(self, user: User) -> Optional[User]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(UserModel, user.id)
            if model is None:
                return None
            model.email = user.email
            model.password = user.password_hash
            model.full_name = user.full_name
            model.avatar = user.avatar
            model.role = user.role.value
            model.email_verified = user.email_verified
            model.user_metadata = user.metadata
            await self.session.commit()
            await self.session.refresh(model)
        return self._to_entity(model)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(UserModel, user_id, populate_existing=True)
        return self._to_entity(model) if model else None

    async def find_by_email(self, email: str) -> Optional[User]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                select(UserModel).where(UserModel.email == normalize_email(email))
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_all(self) -> List[User]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                select(UserModel).order_by(UserModel.created_at.desc())
            )
            models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def delete(self, user_id: str) -> bool:
        async with translate_db_errors(self.session, _LABEL):
            model = await self.session.get(UserModel, user_id)
            if not model:
                return False
            await self.session.delete(model)
            await self.session.commit()
            return True

    # =========================================================================
    # Маппинг Entity ↔ Model
    # =========================================================================

    def _to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            email=entity.email,
            password=entity.password_hash,
            full_name=entity.full_name,
            avatar=entity.avatar,
            role=entity.role.value,
            email_verified=entity.email_verified,
            user_metadata=entity.metadata,
            created_at=entity.created_at,
        )

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password,
            full_name=model.full_name,
            avatar=model.avatar,
            role=UserRole(model.role),
            email_verified=model.email_verified,
            metadata=model.user_metadata,
            created_at=model.created_at,
        )
