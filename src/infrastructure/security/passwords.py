"""
Хэширование паролей через werkzeug.security.

Формат хранения: pbkdf2:sha256:<iterations>$<salt>$<hash>
"""

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

METHOD = "pbkdf2:sha256"
SALT_LENGTH = 16


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    method = f"{METHOD}:{iterations}" if iterations else METHOD
    return generate_password_hash(password, method=method, salt_length=SALT_LENGTH)


def verify_password(password: str, encoded: str) -> bool:
    """Проверить пароль; неизвестный формат считается несовпадением."""
    if not encoded:
        return False
    try:
        return check_password_hash(encoded, password)
    except ValueError:
        return False
