"""
Endpoints do relatório de manutenção.

Assistente de sete etapas ligado a uma ordem de manutenção.
"""

from fastapi import APIRouter, status

from bess_console.core.dependencies import MaintenanceUser, Store
from bess_console.core.session import MAINTENANCE_PATH
from bess_console.schemas.base import APIResponse
from bess_console.schemas.report import (
    MaintenanceReportPatch,
    ReportDraftResponse,
    ReportResponse,
)
from bess_console.services.report_service import MaintenanceReportService

router = APIRouter(prefix="/manutencoes/{order_id}/relatorio", tags=["Relatórios"])


@router.post(
    "",
    response_model=APIResponse[ReportDraftResponse],
    status_code=status.HTTP_201_CREATED,
)
async def start_report(
    order_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportDraftResponse]:
    """Abre o relatório da ordem (ou retoma o rascunho aberto)."""
    service = MaintenanceReportService(store)
    draft = service.start(order_id)
    return APIResponse(success=True, data=service.to_response(draft))


@router.get("/{draft_id}", response_model=APIResponse[ReportDraftResponse])
async def get_report_draft(
    order_id: str,
    draft_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportDraftResponse]:
    """Estado atual do rascunho."""
    service = MaintenanceReportService(store)
    return APIResponse(success=True, data=service.to_response(service.get(order_id, draft_id)))


@router.patch("/{draft_id}", response_model=APIResponse[ReportDraftResponse])
async def update_report_draft(
    order_id: str,
    draft_id: str,
    dados: MaintenanceReportPatch,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportDraftResponse]:
    """
    Preenche campos de qualquer etapa.

    Tipos são checados aqui; campos obrigatórios só no envio.
    """
    service = MaintenanceReportService(store)
    draft = service.update_fields(
        order_id,
        draft_id,
        dados.model_dump(exclude_unset=True, mode="json"),
    )
    return APIResponse(success=True, data=service.to_response(draft))


@router.post("/{draft_id}/next", response_model=APIResponse[ReportDraftResponse])
async def next_report_step(
    order_id: str,
    draft_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportDraftResponse]:
    """Avança uma etapa (sem validação)."""
    service = MaintenanceReportService(store)
    draft = service.next_step(order_id, draft_id)
    return APIResponse(success=True, data=service.to_response(draft))


@router.post("/{draft_id}/previous", response_model=APIResponse[ReportDraftResponse])
async def previous_report_step(
    order_id: str,
    draft_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportDraftResponse]:
    """Volta uma etapa."""
    service = MaintenanceReportService(store)
    draft = service.previous_step(order_id, draft_id)
    return APIResponse(success=True, data=service.to_response(draft))


@router.post("/{draft_id}/rascunho", response_model=APIResponse[ReportDraftResponse])
async def save_report_draft(
    order_id: str,
    draft_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportDraftResponse]:
    """Salva o rascunho."""
    service = MaintenanceReportService(store)
    draft = service.save_draft(order_id, draft_id)
    return APIResponse(
        success=True,
        data=service.to_response(draft),
        message="Rascunho salvo com sucesso",
    )


@router.post(
    "/{draft_id}/submit",
    response_model=APIResponse[ReportResponse],
    status_code=status.HTTP_201_CREATED,
)
async def submit_report(
    order_id: str,
    draft_id: str,
    store: Store,
    current_user: MaintenanceUser,
) -> APIResponse[ReportResponse]:
    """
    Envia o relatório.

    Só na última etapa; devolve os erros de todos os campos pendentes.
    """
    service = MaintenanceReportService(store)
    report = service.submit(order_id, draft_id, submitted_by=current_user.email)
    return APIResponse(
        success=True,
        data=ReportResponse.model_validate(report),
        message="Relatório salvo com sucesso",
        redirect_to=MAINTENANCE_PATH,
    )
