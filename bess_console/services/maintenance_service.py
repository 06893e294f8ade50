"""
Service das ordens de manutenção.
"""

from datetime import datetime

import structlog

from bess_console.core.config import settings
from bess_console.core.exceptions import ResourceNotFoundError
from bess_console.core.filtering import Page, paginate
from bess_console.db.store import MemoryStore
from bess_console.models.maintenance import MaintenanceOrder, Reference
from bess_console.repositories.bess_repository import BESSRepository
from bess_console.repositories.maintenance_repository import (
    MaintenanceOrderRepository,
    TechnicianRepository,
)
from bess_console.schemas.maintenance import (
    OrderCreate,
    OrderResponse,
    OrderUpdate,
    ReferenceResponse,
)

logger = structlog.get_logger()


class MaintenanceOrderService:
    """
    Service para ordens de manutenção.

    Não há checagem de integridade referencial: uma ordem pode apontar
    para um sistema ou técnico inexistente e continua listada.
    """

    def __init__(self, store: MemoryStore):
        self._repo = MaintenanceOrderRepository(store)
        self._bess_repo = BESSRepository(store)
        self._technician_repo = TechnicianRepository(store)

    def to_response(self, order: MaintenanceOrder) -> OrderResponse:
        """Ordem com referências resolvidas (ou null)."""
        bess_system = self._repo.resolve_bess_system(order)
        technician = self._repo.resolve_technician(order)
        return OrderResponse(
            id=order.id,
            bess_system_id=order.bess_system_id,
            technician_id=order.technician_id,
            created_at=order.created_at,
            bess_system=ReferenceResponse.model_validate(bess_system) if bess_system else None,
            technician=ReferenceResponse.model_validate(technician) if technician else None,
        )

    def create(self, dados: OrderCreate) -> MaintenanceOrder:
        order = self._repo.add(
            MaintenanceOrder(
                id=self._repo.next_id(),
                bess_system_id=dados.bess_system_id,
                technician_id=dados.technician_id,
                created_at=datetime.now(),
            )
        )
        logger.info(
            "Ordem de manutenção criada",
            order_id=order.id,
            bess_system_id=order.bess_system_id,
            technician_id=order.technician_id,
        )
        return order

    def get(self, order_id: str) -> MaintenanceOrder:
        order = self._repo.get_by_id(order_id)
        if order is None:
            raise ResourceNotFoundError("Ordem de manutenção", order_id)
        return order

    def search(
        self,
        search: str | None = None,
        bess_system_id: str | None = None,
        technician_id: str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> Page[MaintenanceOrder]:
        orders = self._repo.search(search, bess_system_id, technician_id)
        return paginate(orders, page, page_size or settings.PAGE_SIZE)

    def update(self, order_id: str, dados: OrderUpdate) -> MaintenanceOrder:
        order = self._repo.update(order_id, **dados.model_dump())
        if order is None:
            raise ResourceNotFoundError("Ordem de manutenção", order_id)
        logger.info("Ordem de manutenção atualizada", order_id=order_id)
        return order

    def delete(self, order_id: str) -> None:
        if not self._repo.delete(order_id):
            raise ResourceNotFoundError("Ordem de manutenção", order_id)
        logger.info("Ordem de manutenção removida", order_id=order_id)

    def options(self) -> tuple[list[Reference], list[Reference]]:
        """Sistemas BESS e técnicos disponíveis para os selects."""
        systems = [Reference(s.id, s.label) for s in self._bess_repo.get_all()]
        technicians = [Reference(t.id, t.name) for t in self._technician_repo.get_all()]
        return systems, technicians
