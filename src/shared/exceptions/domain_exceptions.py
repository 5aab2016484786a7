"""
Исключения доменного слоя inno-fair.

Маппинг на HTTP-коды находится в src/api/errors.py.
"""


class DomainException(Exception):
    """Базовое исключение: ошибка, которую клиент может исправить сам (4xx)."""
    pass


class DomainValidationError(DomainException):
    """Ошибка валидации доменной сущности или входных данных."""
    pass


class EntityNotFoundError(DomainException):
    """Запись (контент, комментарий, пользователь, файл) не найдена."""
    pass


class DuplicateEntityError(DomainException):
    """Дубликат сущности (email, slug, токен)."""
    pass


class BusinessRuleViolation(DomainException):
    """Нарушение правила ссылочной целостности или рабочего процесса."""
    pass


class ForbiddenError(BusinessRuleViolation):
    """Роль пользователя не позволяет выполнить действие."""
    pass


class AuthenticationRequiredError(DomainException):
    """Действие требует аутентифицированного пользователя."""
    pass


class InvalidCredentialsError(AuthenticationRequiredError):
    """Неверный email или пароль."""
    pass
