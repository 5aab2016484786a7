"""
JWT session management
"""

from datetime import datetime, timedelta

from jose import JWTError, jwt

from src.domain.entities.user import User
from src.domain.value_objects.principal import Principal
from src.infrastructure.config.settings import get_settings
from src.shared.exceptions.domain_exceptions import AuthenticationRequiredError


def create_access_token(user: User) -> str:
    """
    Create JWT access token for user

    Args:
        user: User entity

    Returns:
        JWT token string
    """
    settings = get_settings()
    now = datetime.utcnow()

    payload = {
        "sub": user.id,
        "email": user.email,
        "role": user.role.value,
        "exp": now + timedelta(minutes=settings.jwt_expire_minutes),
        "iat": now,
    }

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """
    Decode and validate JWT token

    Raises:
        jose.JWTError if token invalid/expired
    """
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


def principal_from_token(token: str) -> Principal:
    """Principal из токена или AuthenticationRequiredError."""
    try:
        payload = decode_access_token(token)
        return Principal(user_id=payload["sub"], role=payload["role"])
    except (JWTError, KeyError, ValueError) as e:
        raise AuthenticationRequiredError("Invalid or expired session") from e
