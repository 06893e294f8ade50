"""
Endpoints de Autenticação.

Rotas para login, sessão, recuperação de senha e cadastro de usuários.
"""

from typing import Any

from fastapi import APIRouter, Body, Response, status

from bess_console.core.config import settings
from bess_console.core.dependencies import CurrentUser, Store
from bess_console.core.security import check_password_strength
from bess_console.core.session import LOGIN_PATH
from bess_console.schemas.base import APIResponse
from bess_console.schemas.user import (
    LoginRequest,
    LoginResponse,
    PasswordCreation,
    PasswordRecoveryRequest,
    PasswordStrengthRequest,
    PasswordStrengthResponse,
    RegistrationResponse,
    RegistrationStart,
    SessionUserResponse,
    UserResponse,
)
from bess_console.services.auth_service import AuthService
from bess_console.services.registration_service import RegistrationService

router = APIRouter(prefix="/auth", tags=["Autenticação"])


@router.post("/login", response_model=APIResponse[LoginResponse])
async def login(request: LoginRequest, response: Response) -> APIResponse[LoginResponse]:
    """
    Login com email e senha.

    Grava o marcador de sessão e indica a página inicial do papel.
    """
    service = AuthService()
    user, redirect_to = await service.login(request.email, request.password)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=user.to_json(),
        max_age=settings.SESSION_COOKIE_MAX_AGE,
        samesite="lax",
    )

    return APIResponse(
        success=True,
        data=LoginResponse(
            user=SessionUserResponse.model_validate(user),
            redirect_to=redirect_to,
        ),
        message="Login realizado com sucesso",
        redirect_to=redirect_to,
    )


@router.post("/logout", response_model=APIResponse)
async def logout(response: Response) -> APIResponse:
    """Remove o marcador de sessão ("Sair" do menu lateral)."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return APIResponse(success=True, message="Sessão encerrada", redirect_to=LOGIN_PATH)


@router.get("/me", response_model=APIResponse[SessionUserResponse])
async def get_me(current_user: CurrentUser) -> APIResponse[SessionUserResponse]:
    """Retorna o usuário da sessão."""
    return APIResponse(success=True, data=SessionUserResponse.model_validate(current_user))


@router.post("/recuperar-senha", response_model=APIResponse)
async def recover_password(request: PasswordRecoveryRequest) -> APIResponse:
    """Envia o link de redefinição de senha."""
    service = AuthService()
    message = await service.request_password_recovery(request.email)
    return APIResponse(success=True, message=message)


@router.post("/password-strength", response_model=APIResponse[PasswordStrengthResponse])
async def password_strength(request: PasswordStrengthRequest) -> APIResponse[PasswordStrengthResponse]:
    """Checklist de requisitos da senha, avaliado a cada tecla."""
    strength = check_password_strength(request.password)
    return APIResponse(success=True, data=PasswordStrengthResponse.model_validate(strength))


# === Cadastro de usuário ===

@router.post(
    "/cadastro",
    response_model=APIResponse[RegistrationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def start_registration(
    dados: RegistrationStart,
    store: Store,
) -> APIResponse[RegistrationResponse]:
    """Inicia o cadastro na etapa de criação de senha."""
    service = RegistrationService(store)
    draft = service.start(dados)
    return APIResponse(success=True, data=service.to_response(draft))


@router.get("/cadastro/{registration_id}", response_model=APIResponse[RegistrationResponse])
async def get_registration(registration_id: str, store: Store) -> APIResponse[RegistrationResponse]:
    """Estado do cadastro em andamento."""
    service = RegistrationService(store)
    return APIResponse(success=True, data=service.to_response(service.get(registration_id)))


@router.post("/cadastro/{registration_id}/senha", response_model=APIResponse[RegistrationResponse])
async def define_password(
    registration_id: str,
    dados: PasswordCreation,
    store: Store,
) -> APIResponse[RegistrationResponse]:
    """Define a senha e avança para os dados pessoais."""
    service = RegistrationService(store)
    draft = service.define_password(registration_id, dados)
    return APIResponse(success=True, data=service.to_response(draft))


@router.post("/cadastro/{registration_id}/previous", response_model=APIResponse[RegistrationResponse])
async def registration_previous_step(
    registration_id: str,
    store: Store,
) -> APIResponse[RegistrationResponse]:
    """Volta para a etapa anterior."""
    service = RegistrationService(store)
    draft = service.previous_step(registration_id)
    return APIResponse(success=True, data=service.to_response(draft))


@router.post(
    "/cadastro/{registration_id}/dados",
    response_model=APIResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def complete_registration(
    registration_id: str,
    store: Store,
    dados: dict[str, Any] = Body(...),
) -> APIResponse[UserResponse]:
    """
    Conclui o cadastro.

    Os campos aceitos dependem do tipo de usuário escolhido no início.
    """
    service = RegistrationService(store)
    user = service.complete(registration_id, dados)
    return APIResponse(
        success=True,
        data=UserResponse.model_validate(user),
        message="Cadastro concluído com sucesso",
        redirect_to=LOGIN_PATH,
    )
