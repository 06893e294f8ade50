"""
Endpoints das ordens de manutenção.

Acessíveis a técnicos e gerentes técnicos.
"""

from fastapi import APIRouter, Query, status

from bess_console.core.dependencies import MaintenanceUser, Store
from bess_console.schemas.base import APIResponse, PaginatedResponse
from bess_console.schemas.maintenance import (
    OrderCreate,
    OrderOptions,
    OrderResponse,
    OrderUpdate,
    ReferenceResponse,
)
from bess_console.services.maintenance_service import MaintenanceOrderService

router = APIRouter(prefix="/manutencoes", tags=["Manutenções"])


@router.post(
    "",
    response_model=APIResponse[OrderResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    dados: OrderCreate,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[OrderResponse]:
    """Cria ordem de manutenção."""
    service = MaintenanceOrderService(store)
    order = service.create(dados)
    return APIResponse(
        success=True,
        data=service.to_response(order),
        message="Ordem de manutenção criada com sucesso",
    )


@router.get("", response_model=PaginatedResponse[OrderResponse])
async def list_orders(
    store: Store,
    current_user: MaintenanceUser,
    search: str | None = Query(None, description="Sistema BESS, técnico ou ID"),
    bess_system_id: str | None = Query(None),
    technician_id: str | None = Query(None),
    page: int = Query(1),
) -> PaginatedResponse[OrderResponse]:
    """Lista ordens com referências resolvidas."""
    service = MaintenanceOrderService(store)
    result = service.search(search, bess_system_id, technician_id, page)
    return PaginatedResponse.from_page(
        result,
        [service.to_response(o) for o in result.items],
    )


@router.get("/opcoes", response_model=APIResponse[OrderOptions])
async def get_order_options(
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[OrderOptions]:
    """Opções dos selects de sistema BESS e técnico."""
    service = MaintenanceOrderService(store)
    systems, technicians = service.options()
    return APIResponse(
        success=True,
        data=OrderOptions(
            bess_systems=[ReferenceResponse.model_validate(s) for s in systems],
            technicians=[ReferenceResponse.model_validate(t) for t in technicians],
        ),
    )


@router.get("/{order_id}", response_model=APIResponse[OrderResponse])
async def get_order(
    order_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[OrderResponse]:
    """Obtém uma ordem de manutenção."""
    service = MaintenanceOrderService(store)
    return APIResponse(success=True, data=service.to_response(service.get(order_id)))


@router.put("/{order_id}", response_model=APIResponse[OrderResponse])
async def update_order(
    order_id: str,
    dados: OrderUpdate,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[OrderResponse]:
    """Troca o sistema BESS ou o técnico da ordem."""
    service = MaintenanceOrderService(store)
    order = service.update(order_id, dados)
    return APIResponse(
        success=True,
        data=service.to_response(order),
        message="Ordem de manutenção atualizada com sucesso",
    )


@router.delete("/{order_id}", response_model=APIResponse)
async def delete_order(
    order_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse:
    """Remove ordem de manutenção."""
    service = MaintenanceOrderService(store)
    service.delete(order_id)
    return APIResponse(success=True, message="Ordem de manutenção removida com sucesso")
