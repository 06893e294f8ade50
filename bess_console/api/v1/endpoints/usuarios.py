"""
Endpoints de Usuários.

Lista dos usuários cadastrados (página de administradores).
"""

from fastapi import APIRouter, Query

from bess_console.core.dependencies import AdminUser, Store
from bess_console.models.user import Role
from bess_console.schemas.base import PaginatedResponse
from bess_console.schemas.user import UserResponse
from bess_console.services.registration_service import RegistrationService

router = APIRouter(prefix="/usuarios", tags=["Usuários"])


@router.get("", response_model=PaginatedResponse[UserResponse])
async def list_users(
    store: Store,
    current_user: AdminUser,
    search: str | None = Query(None, description="Nome ou e-mail"),
    role: Role | None = Query(None),
    page: int = Query(1),
) -> PaginatedResponse[UserResponse]:
    """Lista usuários cadastrados pelo assistente de cadastro."""
    service = RegistrationService(store)
    result = service.list_users(search, role, page)
    return PaginatedResponse.from_page(
        result,
        [UserResponse.model_validate(u) for u in result.items],
    )
