"""
Endpoints dos sistemas BESS.

Cadastro, consulta e dashboard de leituras (somente administradores).
"""

from datetime import date

from fastapi import APIRouter, Query, status
from pydantic import ValidationError as PydanticValidationError

from bess_console.core.dependencies import AdminUser, Store
from bess_console.core.exceptions import ValidationError
from bess_console.core.filtering import SortOrder
from bess_console.schemas.base import APIResponse, PaginatedResponse, field_errors
from bess_console.schemas.bess import (
    BESSCreate,
    BESSResponse,
    DashboardFilters,
    DashboardParameter,
    DashboardResponse,
    ReadingResponse,
    ValueCondition,
)
from bess_console.services.bess_service import BESSService

router = APIRouter(prefix="/bess", tags=["BESS"])


@router.post(
    "",
    response_model=APIResponse[BESSResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_bess_system(
    dados: BESSCreate,
    store: Store,
    current_user: AdminUser,
) -> APIResponse[BESSResponse]:
    """Cadastra sistema BESS; todos os campos são obrigatórios."""
    service = BESSService(store)
    system = service.create(dados)
    return APIResponse(
        success=True,
        data=BESSResponse.model_validate(system),
        message="Sistema BESS cadastrado com sucesso!",
    )


@router.get("", response_model=PaginatedResponse[BESSResponse])
async def list_bess_systems(
    store: Store,
    current_user: AdminUser,
    search: str | None = Query(None, description="Fabricante, modelo ou número de série"),
    page: int = Query(1),
) -> PaginatedResponse[BESSResponse]:
    """Lista sistemas BESS paginados."""
    service = BESSService(store)
    result = service.search(search, page)
    return PaginatedResponse.from_page(
        result,
        [BESSResponse.model_validate(s) for s in result.items],
    )


@router.get("/dashboard", response_model=APIResponse[DashboardResponse])
async def get_dashboard(
    store: Store,
    current_user: AdminUser,
    bess_system_id: str | None = Query(None, description="Sistema; padrão é o primeiro"),
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    parameter: DashboardParameter = Query(DashboardParameter.CURRENT),
    condition: ValueCondition = Query(ValueCondition.GREATER_THAN),
    value1: float | None = Query(None),
    value2: float | None = Query(None),
    sort: SortOrder = Query(SortOrder.DESC, description="Ordem do ganho financeiro"),
) -> APIResponse[DashboardResponse]:
    """
    Dashboard de leituras diárias.

    Filtra por período e por valor de uma grandeza, ordena pelo ganho
    financeiro e totaliza os cartões.
    """
    try:
        filters = DashboardFilters(
            bess_system_id=bess_system_id,
            date_from=date_from,
            date_to=date_to,
            parameter=parameter,
            condition=condition,
            value1=value1,
            value2=value2,
            sort=sort,
        )
    except PydanticValidationError as e:
        raise ValidationError("Filtros inválidos", errors=field_errors(e)) from e

    service = BESSService(store)
    system, readings, summary = service.dashboard(filters)

    return APIResponse(
        success=True,
        data=DashboardResponse(
            bess_system=BESSResponse.model_validate(system),
            filters=filters,
            readings=[ReadingResponse.model_validate(r) for r in readings],
            summary=summary,
        ),
    )


@router.get("/{bess_system_id}", response_model=APIResponse[BESSResponse])
async def get_bess_system(
    bess_system_id: str,
    store: Store,
    current_user: AdminUser,
) -> APIResponse[BESSResponse]:
    """Obtém detalhes de um sistema BESS."""
    service = BESSService(store)
    return APIResponse(success=True, data=BESSResponse.model_validate(service.get(bess_system_id)))
