"""
FastAPI Routes для администрирования пользователей.
"""

from typing import List

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_principal, get_user_service
from src.api.schemas.common_schemas import SuccessResponse
from src.api.schemas.user_schemas import AssistantResponse, CreateAssistantRequest, UserResponse
from src.application.services.user_service import UserService
from src.domain.value_objects.principal import Principal
from src.shared.exceptions.domain_exceptions import EntityNotFoundError

router = APIRouter(prefix="/users", tags=["users"])
admin_router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    users = await service.list_users(principal)
    return [UserResponse.from_entity(u) for u in users]


@router.delete("/{user_id}", response_model=SuccessResponse)
async def delete_user(
    user_id: str,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    if not await service.delete_user(user_id, principal):
        raise EntityNotFoundError("User not found")
    return SuccessResponse()


@admin_router.post("/assistants", response_model=AssistantResponse, status_code=201)
async def create_assistant(
    request: CreateAssistantRequest,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service)
):
    """Создать аккаунт ассистента."""
    user = await service.create_assistant(
        principal,
        full_name=request.full_name,
        email=request.email,
        password=request.password,
        services=request.services,
        notes=request.notes,
    )
    return AssistantResponse(user=UserResponse.from_entity(user))
