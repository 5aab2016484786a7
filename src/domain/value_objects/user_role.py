"""
Value Object: UserRole

Роль пользователя платформы.
"""

from enum import Enum


class UserRole(str, Enum):
    """Фиксированный набор ролей."""

    SUPER_ADMIN = "super_admin"      # Главный администратор
    EDITOR_ADMIN = "editor_admin"    # Редактор
    ASSISTANT = "assistant"          # Ассистент
    USER = "user"                    # Обычный пользователь
    INVESTOR = "investor"            # Инвестор
    CLIENT = "mijoz"                 # Клиент

    @property
    def display_name(self) -> str:
        """Человекочитаемое имя (узбекский)."""
        names = {
            UserRole.SUPER_ADMIN: "Bosh administrator",
            UserRole.EDITOR_ADMIN: "Muharrir",
            UserRole.ASSISTANT: "Yordamchi",
            UserRole.USER: "Foydalanuvchi",
            UserRole.INVESTOR: "Investor",
            UserRole.CLIENT: "Mijoz",
        }
        return names[self]

    @property
    def is_staff(self) -> bool:
        """Сотрудник редакции (может готовить контент)."""
        return self in (UserRole.SUPER_ADMIN, UserRole.EDITOR_ADMIN, UserRole.ASSISTANT)

    @classmethod
    def self_registration_roles(cls) -> tuple:
        """Роли, доступные при самостоятельной регистрации."""
        return (cls.INVESTOR, cls.CLIENT)

    @classmethod
    def parse(cls, value) -> "UserRole":
        """Привести строку к роли (регистронезависимо)."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())
