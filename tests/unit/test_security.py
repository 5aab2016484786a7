"""
Unit tests для паролей и JWT.
"""

import pytest
from werkzeug.security import check_password_hash, generate_password_hash

from src.domain.entities.user import User
from src.domain.value_objects.user_role import UserRole
from src.infrastructure.security.jwt_session import create_access_token, principal_from_token
from src.infrastructure.security.passwords import hash_password, verify_password
from src.shared.exceptions.domain_exceptions import AuthenticationRequiredError


def test_password_is_hashed_and_verified():
    """Тест: пароль не хранится в открытом виде."""
    encoded = hash_password("parol123", iterations=1000)

    assert "parol123" not in encoded
    assert encoded.startswith("pbkdf2:sha256:1000$")
    assert verify_password("parol123", encoded) is True
    assert verify_password("boshqa", encoded) is False


def test_same_password_gets_different_salt():
    assert hash_password("x", iterations=1000) != hash_password("x", iterations=1000)


def test_verify_password_rejects_garbage():
    assert verify_password("x", "plain-text") is False
    assert verify_password("x", "md5$1$00$00") is False


def test_token_round_trip_to_principal():
    user = User(email="admin@gmail.com", password_hash="h", full_name="Admin", role=UserRole.SUPER_ADMIN)

    principal = principal_from_token(create_access_token(user))

    assert principal.user_id == user.id
    assert principal.role == UserRole.SUPER_ADMIN


def test_invalid_token_requires_authentication():
    with pytest.raises(AuthenticationRequiredError):
        principal_from_token("not-a-jwt")


def test_password_hash_is_werkzeug_compatible():
    """Тест: хэш читается werkzeug и наоборот."""
    assert check_password_hash(hash_password("parol123", iterations=1000), "parol123")
    assert verify_password("parol123", generate_password_hash("parol123", method="pbkdf2:sha256"))
    assert verify_password("parol123", "") is False
