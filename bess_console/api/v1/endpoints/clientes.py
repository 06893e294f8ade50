"""
Endpoints de Clientes.

Rotas para gerenciamento de clientes (somente administradores).
"""

from fastapi import APIRouter, Query, status

from bess_console.core.dependencies import AdminUser, Store
from bess_console.core.filtering import ALL
from bess_console.schemas.base import APIResponse, PaginatedResponse
from bess_console.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from bess_console.services.client_service import ClientService

router = APIRouter(prefix="/clientes", tags=["Clientes"])


@router.post(
    "",
    response_model=APIResponse[ClientResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_client(
    dados: ClientCreate,
    store: Store,
    current_user: AdminUser,
) -> APIResponse[ClientResponse]:
    """Cria novo cliente."""
    service = ClientService(store)
    client = service.create(dados)
    return APIResponse(
        success=True,
        data=ClientResponse.model_validate(client),
        message="Cliente adicionado com sucesso",
    )


@router.get("", response_model=PaginatedResponse[ClientResponse])
async def list_clients(
    store: Store,
    current_user: AdminUser,
    search: str | None = Query(None, description="Parte do nome"),
    document_type: str = Query(ALL, pattern="^(all|cpf|cnpj)$", description="all, cpf ou cnpj"),
    page: int = Query(1),
) -> PaginatedResponse[ClientResponse]:
    """Lista clientes filtrados, paginados de cinco em cinco."""
    service = ClientService(store)
    result = service.search(search, document_type, page)
    return PaginatedResponse.from_page(
        result,
        [ClientResponse.model_validate(c) for c in result.items],
    )


@router.get("/{client_id}", response_model=APIResponse[ClientResponse])
async def get_client(
    client_id: str,
    store: Store,
    current_user: AdminUser,
) -> APIResponse[ClientResponse]:
    """Obtém detalhes de um cliente específico."""
    service = ClientService(store)
    return APIResponse(success=True, data=ClientResponse.model_validate(service.get(client_id)))


@router.put("/{client_id}", response_model=APIResponse[ClientResponse])
async def update_client(
    client_id: str,
    dados: ClientUpdate,
    store: Store,
    current_user: AdminUser,
) -> APIResponse[ClientResponse]:
    """Atualiza dados de um cliente."""
    service = ClientService(store)
    client = service.update(client_id, dados)
    return APIResponse(
        success=True,
        data=ClientResponse.model_validate(client),
        message="Cliente atualizado com sucesso",
    )


@router.delete("/{client_id}", response_model=APIResponse)
async def delete_client(
    client_id: str,
    store: Store,
    current_user: AdminUser,
) -> APIResponse:
    """Exclui um cliente. Não pode ser desfeito."""
    service = ClientService(store)
    service.delete(client_id)
    return APIResponse(success=True, message="Cliente excluído com sucesso")
