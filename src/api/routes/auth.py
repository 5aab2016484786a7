"""
FastAPI Routes для аутентификации и профиля.
"""

from fastapi import APIRouter, Depends, Response

from src.api.dependencies import ACCESS_TOKEN_COOKIE, get_auth_service, get_current_principal
from src.api.schemas.common_schemas import SuccessResponse
from src.api.schemas.user_schemas import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    ProfileUpdateRequest,
    RegisterRequest,
    RegisterResponse,
    UserEnvelope,
    UserResponse,
)
from src.application.commands.register_user_command import RegisterUserCommand
from src.application.services.auth_service import AuthService
from src.domain.value_objects.principal import Principal
from src.infrastructure.config.settings import get_settings

router = APIRouter(prefix="/auth", tags=["auth"])

REGISTER_MESSAGE = (
    "Ro'yxatdan o'tdingiz! Gmail manzilingizni tasdiqlash uchun emailingizni tekshiring."
)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """Вход: токен в теле ответа и в httponly cookie."""
    result = await service.login(request.email, request.password)

    settings = get_settings()
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        result.access_token,
        max_age=settings.jwt_expire_minutes * 60,
        httponly=True,
        samesite="lax",
    )
    return LoginResponse(
        user=UserResponse.from_entity(result.user),
        access_token=result.access_token,
        token_type=result.token_type,
    )


@router.post("/logout", response_model=SuccessResponse)
async def logout(response: Response):
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return SuccessResponse()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    command = RegisterUserCommand(
        email=request.email,
        password=request.password,
        full_name=request.full_name,
        role=request.role,
    )
    user = await service.register(command)
    return RegisterResponse(user=UserResponse.from_entity(user), message=REGISTER_MESSAGE)


@router.get("/verify-email", response_model=SuccessResponse)
async def verify_email(
    token: str = "",
    service: AuthService = Depends(get_auth_service)
):
    await service.verify_email(token)
    return SuccessResponse(message="Gmail manzilingiz muvaffaqiyatli tasdiqlandi!")


@router.get("/me", response_model=UserResponse)
async def me(
    principal: Principal = Depends(get_current_principal),
    service: AuthService = Depends(get_auth_service)
):
    user = await service.get_user(principal.user_id)
    return UserResponse.from_entity(user)


@router.patch("/profile", response_model=UserEnvelope)
async def update_profile(
    request: ProfileUpdateRequest,
    principal: Principal = Depends(get_current_principal),
    service: AuthService = Depends(get_auth_service)
):
    user = await service.update_profile(
        principal.user_id,
        full_name=request.full_name,
        email=request.email,
        avatar=request.avatar,
    )
    return UserEnvelope(user=UserResponse.from_entity(user))


@router.patch("/change-password", response_model=SuccessResponse)
async def change_password(
    request: ChangePasswordRequest,
    principal: Principal = Depends(get_current_principal),
    service: AuthService = Depends(get_auth_service)
):
    await service.change_password(principal.user_id, request.current_password, request.new_password)
    return SuccessResponse(message="Parol muvaffaqiyatli yangilandi")
