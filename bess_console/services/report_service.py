"""
Service do relatório de manutenção.

Conduz o assistente de sete etapas: preenchimento parcial livre,
navegação sem validação e validação completa apenas no envio.
"""

from datetime import datetime
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from bess_console.core.exceptions import (
    ResourceNotFoundError,
    ValidationError,
    WizardAlreadySubmittedError,
)
from bess_console.core.wizard import StepWizard, WizardStep
from bess_console.db.store import MemoryStore
from bess_console.models.maintenance import (
    MaintenanceReport,
    MaintenanceReportDraft,
)
from bess_console.repositories.maintenance_repository import (
    MaintenanceOrderRepository,
    ReportDraftRepository,
    ReportRepository,
)
from bess_console.schemas.base import field_errors
from bess_console.schemas.report import (
    REPORT_DEFAULTS,
    REPORT_STEPS,
    MaintenanceReportData,
    ReportDraftResponse,
    WizardStepResponse,
)

logger = structlog.get_logger()


def _step_response(index: int, step: WizardStep) -> WizardStepResponse:
    return WizardStepResponse(index=index, key=step.key, title=step.title, fields=list(step.fields))


class MaintenanceReportService:
    """Service para o assistente de relatório de manutenção."""

    def __init__(self, store: MemoryStore):
        self._orders = MaintenanceOrderRepository(store)
        self._drafts = ReportDraftRepository(store)
        self._reports = ReportRepository(store)

    def to_response(self, draft: MaintenanceReportDraft) -> ReportDraftResponse:
        wizard = draft.wizard
        return ReportDraftResponse(
            id=draft.id,
            order_id=draft.order_id,
            current_step=wizard.current,
            step=_step_response(wizard.current, wizard.current_step),
            steps=[_step_response(i, s) for i, s in enumerate(wizard.steps)],
            progress=wizard.progress,
            is_first=wizard.is_first,
            is_last=wizard.is_last,
            submitted=draft.submitted,
            data=draft.data,
            created_at=draft.created_at,
            updated_at=draft.updated_at,
        )

    def start(self, order_id: str) -> MaintenanceReportDraft:
        """
        Abre o relatório de uma ordem.

        Retoma o rascunho aberto da ordem, se houver.
        """
        if self._orders.get_by_id(order_id) is None:
            raise ResourceNotFoundError("Ordem de manutenção", order_id)

        draft = self._drafts.get_open_by_order(order_id)
        if draft is not None:
            return draft

        draft = self._drafts.add(
            MaintenanceReportDraft(
                id=self._drafts.next_id(),
                order_id=order_id,
                wizard=StepWizard(REPORT_STEPS),
                data=dict(REPORT_DEFAULTS),
            )
        )
        logger.info("Relatório iniciado", order_id=order_id, draft_id=draft.id)
        return draft

    def get(self, order_id: str, draft_id: str) -> MaintenanceReportDraft:
        draft = self._drafts.get_by_id(draft_id)
        if draft is None or draft.order_id != order_id:
            raise ResourceNotFoundError("Rascunho de relatório", draft_id)
        return draft

    def _open(self, order_id: str, draft_id: str) -> MaintenanceReportDraft:
        draft = self.get(order_id, draft_id)
        if draft.submitted:
            raise WizardAlreadySubmittedError(draft_id)
        return draft

    def update_fields(
        self,
        order_id: str,
        draft_id: str,
        values: dict[str, Any],
    ) -> MaintenanceReportDraft:
        """Mescla campos já checados quanto ao tipo; obrigatoriedade fica para o envio."""
        draft = self._open(order_id, draft_id)
        draft.data.update(values)
        draft.updated_at = datetime.now()
        return draft

    def next_step(self, order_id: str, draft_id: str) -> MaintenanceReportDraft:
        draft = self._open(order_id, draft_id)
        draft.wizard.next()
        return draft

    def previous_step(self, order_id: str, draft_id: str) -> MaintenanceReportDraft:
        draft = self._open(order_id, draft_id)
        draft.wizard.previous()
        return draft

    def save_draft(self, order_id: str, draft_id: str) -> MaintenanceReportDraft:
        """
        "Salvar rascunho": o rascunho já vive no store, só confirma.
        """
        draft = self._open(order_id, draft_id)
        logger.info("Rascunho salvo", order_id=order_id, draft_id=draft_id, step=draft.wizard.current)
        return draft

    def submit(self, order_id: str, draft_id: str, submitted_by: str) -> MaintenanceReport:
        """
        Envia o relatório.

        Só a partir da última etapa; valida todos os campos de uma vez.
        """
        draft = self._open(order_id, draft_id)
        draft.wizard.require_last_step()

        try:
            validated = MaintenanceReportData.model_validate(draft.data)
        except PydanticValidationError as e:
            errors = field_errors(e)
            logger.info("Relatório incompleto", draft_id=draft_id, errors=len(errors))
            raise ValidationError(
                "Relatório possui campos obrigatórios não preenchidos ou inválidos",
                errors=errors,
            ) from e

        report = self._reports.add(
            MaintenanceReport(
                id=self._reports.next_id(),
                order_id=order_id,
                data=validated.model_dump(),
                submitted_at=datetime.now(),
                submitted_by=submitted_by,
            )
        )
        draft.submitted = True
        draft.updated_at = report.submitted_at

        logger.info("Relatório salvo", order_id=order_id, report_id=report.id)
        return report
