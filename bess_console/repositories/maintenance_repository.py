"""
Repositories de técnicos, ordens e relatórios de manutenção.
"""

from bess_console.core.filtering import filter_records
from bess_console.db.store import MemoryStore
from bess_console.models.maintenance import (
    MaintenanceOrder,
    MaintenanceReport,
    MaintenanceReportDraft,
    Reference,
    Technician,
)
from bess_console.repositories.base import BaseRepository, SequentialIdRepository


class TechnicianRepository(BaseRepository[Technician]):
    """Lista estática de técnicos."""

    def __init__(self, store: MemoryStore):
        super().__init__(store.technicians)


class MaintenanceOrderRepository(SequentialIdRepository[MaintenanceOrder]):
    """Repository para ordens de manutenção."""

    id_prefix = "maint"

    def __init__(self, store: MemoryStore):
        super().__init__(store.maintenance_orders)
        self._bess_systems = store.bess_systems
        self._technicians = store.technicians

    def resolve_bess_system(self, order: MaintenanceOrder) -> Reference | None:
        """Resolve o sistema BESS da ordem; None se não existir."""
        system = next((s for s in self._bess_systems if s.id == order.bess_system_id), None)
        if system is None:
            return None
        return Reference(id=system.id, label=system.label)

    def resolve_technician(self, order: MaintenanceOrder) -> Reference | None:
        """Resolve o técnico da ordem; None se não existir."""
        technician = next((t for t in self._technicians if t.id == order.technician_id), None)
        if technician is None:
            return None
        return Reference(id=technician.id, label=technician.name)

    def search(
        self,
        query: str | None = None,
        bess_system_id: str | None = None,
        technician_id: str | None = None,
    ) -> list[MaintenanceOrder]:
        """
        Busca ordens pelo rótulo do sistema, nome do técnico ou ID.

        Referências não resolvidas nunca casam com a busca textual.
        """

        def bess_label(order: MaintenanceOrder) -> str | None:
            ref = self.resolve_bess_system(order)
            return ref.label if ref else None

        def technician_name(order: MaintenanceOrder) -> str | None:
            ref = self.resolve_technician(order)
            return ref.label if ref else None

        return filter_records(
            self.records,
            search=query,
            search_fields=(bess_label, technician_name, "id"),
            exact={
                "bess_system_id": bess_system_id,
                "technician_id": technician_id,
            },
        )


class ReportDraftRepository(SequentialIdRepository[MaintenanceReportDraft]):
    """Rascunhos de relatório em preenchimento."""

    id_prefix = "draft"

    def __init__(self, store: MemoryStore):
        super().__init__(store.report_drafts)

    def get_open_by_order(self, order_id: str) -> MaintenanceReportDraft | None:
        """Rascunho ainda não enviado de uma ordem."""
        return next(
            (d for d in self.records if d.order_id == order_id and not d.submitted),
            None,
        )


class ReportRepository(SequentialIdRepository[MaintenanceReport]):
    """Relatórios enviados."""

    id_prefix = "rel"

    def __init__(self, store: MemoryStore):
        super().__init__(store.reports)

