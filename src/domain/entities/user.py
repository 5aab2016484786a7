# -*- coding: utf-8 -*-
"""
Доменная сущность: Пользователь (User)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from src.domain.value_objects.user_role import UserRole
from src.shared.exceptions.domain_exceptions import DomainValidationError
from src.shared.text import normalize_email


@dataclass
class User:
    """
    Доменная сущность пользователя.

    Инварианты:
    - Email не пустой и хранится в нижнем регистре
    - Полное имя не пустое
    - Роль из фиксированного набора UserRole
    - Пароль хранится только в виде хэша
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    email: str = ""
    password_hash: str = ""
    full_name: str = ""
    avatar: Optional[str] = None
    role: UserRole = UserRole.USER
    email_verified: bool = False
    metadata: Optional[dict] = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        self.email = normalize_email(self.email)
        self.role = UserRole.parse(self.role)
        self.validate()

    def validate(self) -> None:
        if not self.email or "@" not in self.email:
            raise DomainValidationError("User email is invalid")
        if not self.full_name or not self.full_name.strip():
            raise DomainValidationError("User full name cannot be empty")
        if not self.password_hash:
            raise DomainValidationError("User password cannot be empty")

    # =========================================================================
    # Бизнес-логика
    # =========================================================================

    def verify_email(self) -> None:
        self.email_verified = True

    def change_email(self, email: str) -> None:
        """Смена email сбрасывает подтверждение."""
        email = normalize_email(email)
        if email == self.email:
            return
        self.email = email
        self.email_verified = False
        self.validate()

    def change_full_name(self, full_name: str) -> None:
        if not full_name or not full_name.strip():
            raise DomainValidationError("User full name cannot be empty")
        self.full_name = full_name.strip()

    def set_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            raise DomainValidationError("User password cannot be empty")
        self.password_hash = password_hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}', role={self.role.value})"
