"""
Трансляция ошибок SQLAlchemy в исключения доменного и инфраструктурного слоёв.
"""

import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.exceptions.domain_exceptions import (
    BusinessRuleViolation,
    DuplicateEntityError,
)
from src.shared.exceptions.infrastructure_exceptions import (
    DatabaseError,
    DependencyUnavailableError,
)

logger = logging.getLogger(__name__)


def _is_foreign_key_violation(error: IntegrityError) -> bool:
    return "foreign key" in str(error.orig).lower()


@asynccontextmanager
async def translate_db_errors(session: AsyncSession, label: str):
    """
    Обернуть операцию репозитория.

    - IntegrityError (unique) -> DuplicateEntityError
    - IntegrityError (foreign key) -> BusinessRuleViolation
    - OperationalError / InterfaceError -> DependencyUnavailableError
    - прочие SQLAlchemyError -> DatabaseError

    При любой ошибке сессия откатывается, чтобы её можно было переиспользовать.
    """
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        if _is_foreign_key_violation(e):
            raise BusinessRuleViolation(f"{label}: referenced record is missing or still in use") from e
        raise DuplicateEntityError(f"{label} already exists") from e
    except (OperationalError, InterfaceError) as e:
        await session.rollback()
        logger.error(f"Database unavailable during {label} operation: {e}")
        raise DependencyUnavailableError(str(e)) from e
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Database error during {label} operation: {e}")
        raise DatabaseError(str(e)) from e
