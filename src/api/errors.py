"""
Маппинг исключений на HTTP-ответы.

Ответ всегда JSON вида {"error": "..."}; ошибки инфраструктуры
логируются и наружу отдаются как "Server error".
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.shared.exceptions.domain_exceptions import (
    AuthenticationRequiredError,
    BusinessRuleViolation,
    DomainException,
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
)
from src.shared.exceptions.infrastructure_exceptions import InfrastructureException

logger = logging.getLogger(__name__)

# Порядок важен: подклассы раньше базовых
DOMAIN_STATUS_CODES = (
    (ForbiddenError, 403),
    (AuthenticationRequiredError, 401),
    (EntityNotFoundError, 404),
    (DomainValidationError, 400),
    (DuplicateEntityError, 400),
    (BusinessRuleViolation, 400),
)


def status_code_for(exc: DomainException) -> int:
    for exc_type, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 400


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.debug(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"error": str(exc) or type(exc).__name__})


async def infrastructure_exception_handler(request: Request, exc: InfrastructureException) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(InfrastructureException, infrastructure_exception_handler)
