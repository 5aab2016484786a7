"""
Доменная сущность: Токен подтверждения email (EmailVerificationToken)
"""

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4


@dataclass
class EmailVerificationToken:
    """Одноразовый токен с ограниченным сроком жизни."""

    user_id: str
    token: str
    expires_at: datetime
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def issue(cls, user_id: str, ttl_hours: int = 24) -> "EmailVerificationToken":
        """Выпустить новый токен (32 случайных байта в hex)."""
        now = datetime.utcnow()
        return cls(
            user_id=user_id,
            token=secrets.token_hex(32),
            expires_at=now + timedelta(hours=ttl_hours),
            created_at=now,
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.utcnow()) > self.expires_at
