"""
Исключения инфраструктурного слоя.

Транслируются из ошибок SQLAlchemy в src/infrastructure/persistence/db_errors.py.
"""


class InfrastructureException(Exception):
    """Базовое исключение: сбой окружения, клиент получает 500."""
    pass


class DatabaseError(InfrastructureException):
    """Ошибка SQL-запроса или транзакции."""
    pass


class DependencyUnavailableError(DatabaseError):
    """Хранилище недоступно (нет соединения)."""
    pass


class ExternalServiceError(InfrastructureException):
    """Ошибка внешнего сервиса (SMTP)."""
    pass


class FileStorageError(InfrastructureException):
    """Ошибка записи файла на диск."""
    pass
