"""
Service dos sistemas BESS e do dashboard de leituras.
"""

import random
from datetime import date, timedelta

import structlog

from bess_console.core.config import settings
from bess_console.core.exceptions import ResourceAlreadyExistsError, ResourceNotFoundError
from bess_console.core.filtering import Page, SortOrder, paginate, sort_records
from bess_console.db.store import MemoryStore
from bess_console.models.bess import BESSSystem, DashboardReading
from bess_console.repositories.bess_repository import BESSRepository
from bess_console.schemas.bess import (
    BESSCreate,
    DashboardFilters,
    DashboardSummary,
    ValueCondition,
)

logger = structlog.get_logger()


class BESSService:
    """Cadastro e consulta de sistemas BESS."""

    def __init__(self, store: MemoryStore):
        self._repo = BESSRepository(store)

    def create(self, dados: BESSCreate) -> BESSSystem:
        """
        Cadastra sistema BESS.

        O número de série identifica o equipamento e não pode repetir.
        """
        if self._repo.get_by_serial_number(dados.serial_number):
            raise ResourceAlreadyExistsError("Sistema BESS", "serial_number", dados.serial_number)

        system = self._repo.add(BESSSystem(id=self._repo.next_id(), **dados.model_dump()))
        logger.info("Sistema BESS cadastrado", bess_system_id=system.id, label=system.label)
        return system

    def get(self, bess_system_id: str) -> BESSSystem:
        system = self._repo.get_by_id(bess_system_id)
        if system is None:
            raise ResourceNotFoundError("Sistema BESS", bess_system_id)
        return system

    def search(
        self,
        search: str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> Page[BESSSystem]:
        return paginate(self._repo.search(search), page, page_size or settings.PAGE_SIZE)

    def first(self) -> BESSSystem:
        """Sistema exibido quando o dashboard não recebe filtro."""
        systems = self._repo.get_all()
        if not systems:
            raise ResourceNotFoundError("Sistema BESS")
        return systems[0]

    def dashboard(
        self,
        filters: DashboardFilters,
        today: date | None = None,
    ) -> tuple[BESSSystem, list[DashboardReading], DashboardSummary]:
        """Leituras filtradas e totais de um sistema."""
        system = self.get(filters.bess_system_id) if filters.bess_system_id else self.first()
        readings = apply_dashboard_filters(
            generate_readings(system.id, settings.DASHBOARD_DAYS, today),
            filters,
        )
        logger.debug("Dashboard calculado", bess_system_id=system.id, readings=len(readings))
        return system, readings, summarize(readings)


def generate_readings(
    bess_system_id: str,
    days: int,
    today: date | None = None,
) -> list[DashboardReading]:
    """
    Gera leituras diárias dos últimos `days` dias.

    A semente vem do ID do sistema, então o mesmo sistema sempre mostra a
    mesma série no mesmo dia.
    """
    today = today or date.today()
    rng = random.Random(f"{bess_system_id}:{today.isoformat()}")
    readings = []
    for offset in range(days, 0, -1):
        readings.append(
            DashboardReading(
                date=today - timedelta(days=offset),
                energy_used=rng.randint(20, 59),
                energy_injected=rng.randint(15, 49),
                voltage=rng.randint(220, 239),
                current=rng.randint(10, 59),
                battery_percentage=rng.randint(0, 99),
                financial_gain=rng.randint(50, 349),
            )
        )
    return readings


def _matches_value(value: float, filters: DashboardFilters) -> bool:
    if filters.value1 is None:
        return True
    if filters.condition == ValueCondition.GREATER_THAN:
        return value > filters.value1
    if filters.condition == ValueCondition.LESS_THAN:
        return value < filters.value1
    if filters.condition == ValueCondition.EQUALS:
        return value == filters.value1
    low, high = sorted((filters.value1, filters.value2))
    return low <= value <= high


def apply_dashboard_filters(
    readings: list[DashboardReading],
    filters: DashboardFilters,
) -> list[DashboardReading]:
    """Aplica período, filtro por valor e ordenação por ganho financeiro."""
    result = [
        r for r in readings
        if (filters.date_from is None or r.date >= filters.date_from)
        and (filters.date_to is None or r.date <= filters.date_to)
        and _matches_value(getattr(r, filters.parameter.value), filters)
    ]
    return sort_records(result, "financial_gain", filters.sort or SortOrder.DESC)


def summarize(readings: list[DashboardReading]) -> DashboardSummary:
    """Totais dos cartões; média zero quando não há leituras."""
    average = 0
    if readings:
        average = sum(r.battery_percentage for r in readings) // len(readings)
    return DashboardSummary(
        total_energy_used=sum(r.energy_used for r in readings),
        total_energy_injected=sum(r.energy_injected for r in readings),
        average_battery_percentage=average,
        total_financial_gain=sum(r.financial_gain for r in readings),
        peak_tariff=settings.PEAK_TARIFF,
        off_peak_tariff=settings.OFF_PEAK_TARIFF,
    )
