"""
SQLAlchemy Repository реализация для токенов подтверждения email.
"""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.verification_token import EmailVerificationToken
from src.domain.repositories.verification_token_repository import IVerificationTokenRepository
from src.infrastructure.persistence.db_errors import translate_db_errors
from src.infrastructure.persistence.models import EmailVerificationTokenModel

_LABEL = "Verification token"


class VerificationTokenRepositoryImpl(IVerificationTokenRepository):

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(self, token: EmailVerificationToken) -> EmailVerificationToken:
        model = EmailVerificationTokenModel(
            id=token.id,
            user_id=token.user_id,
            token=token.token,
            expires_at=token.expires_at,
            created_at=token.created_at,
        )
        async with translate_db_errors(self.session, _LABEL):
            self.session.add(model)
            await self.session.commit()
        return token

    async def find_by_token(self, token: str) -> Optional[EmailVerificationToken]:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                select(EmailVerificationTokenModel).where(EmailVerificationTokenModel.token == token)
            )
            model = result.scalar_one_or_none()
        if model is None:
            return None
        return EmailVerificationToken(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            expires_at=model.expires_at,
            created_at=model.created_at,
        )

    async def delete_by_token(self, token: str) -> bool:
        async with translate_db_errors(self.session, _LABEL):
            result = await self.session.execute(
                delete(EmailVerificationTokenModel)
                .where(EmailVerificationTokenModel.token == token)
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
        return result.rowcount > 0
