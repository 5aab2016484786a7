"""
Repository Interface: IVerificationTokenRepository
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.verification_token import EmailVerificationToken


class IVerificationTokenRepository(ABC):
    """Порт хранилища токенов подтверждения email."""

    @abstractmethod
    async def save(self, token: EmailVerificationToken) -> EmailVerificationToken:
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[EmailVerificationToken]:
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> bool:
        pass
