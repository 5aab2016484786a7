"""
Value Object: Principal

Аутентифицированный субъект запроса. Передаётся явно в каждый вызов
application-слоя; глобального «текущего пользователя» нет.
"""

from dataclasses import dataclass

from src.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class Principal:
    user_id: str
    role: UserRole

    def __post_init__(self):
        object.__setattr__(self, "role", UserRole.parse(self.role))
