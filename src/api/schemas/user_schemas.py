"""
Pydantic schemas для пользователей и аутентификации.

Пароль и его хэш никогда не попадают в ответы.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities.user import User


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    """Запрос самостоятельной регистрации."""

    email: str
    password: str
    full_name: str
    role: Optional[str] = None


class ProfileUpdateRequest(BaseModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str


class CreateAssistantRequest(BaseModel):
    full_name: str
    email: str
    password: str
    services: List[str] = []
    notes: Optional[str] = None


class UserResponse(BaseModel):
    """Публичное представление пользователя."""

    id: str
    email: str
    full_name: str
    avatar: Optional[str]
    role: str
    email_verified: bool
    metadata: Optional[dict]
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: User) -> "UserResponse":
        return cls(
            id=entity.id,
            email=entity.email,
            full_name=entity.full_name,
            avatar=entity.avatar,
            role=entity.role.value,
            email_verified=entity.email_verified,
            metadata=entity.metadata,
            created_at=entity.created_at,
        )

    class Config:
        from_attributes = True


class UserEnvelope(BaseModel):
    user: UserResponse


class LoginResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str = "bearer"


class RegisterResponse(BaseModel):
    user: UserResponse
    message: str


class AssistantResponse(BaseModel):
    user: UserResponse
    login_link: str = "/admin/login"
