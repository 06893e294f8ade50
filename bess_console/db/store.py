"""
Store em memória do console.

Substitui o banco de dados: cada coleção é uma lista ordenada semeada
com os dados de exemplo. Tudo se perde ao reiniciar o processo.
"""

from dataclasses import dataclass, field
from functools import lru_cache

from bess_console.db import seed
from bess_console.models.bess import BESSSystem
from bess_console.models.client import Client
from bess_console.models.maintenance import (
    MaintenanceOrder,
    MaintenanceReport,
    MaintenanceReportDraft,
    Technician,
)
from bess_console.models.user import RegistrationDraft, User


@dataclass
class MemoryStore:
    """Coleções do console, na ordem de inserção."""

    clients: list[Client] = field(default_factory=list)
    bess_systems: list[BESSSystem] = field(default_factory=list)
    technicians: list[Technician] = field(default_factory=list)
    maintenance_orders: list[MaintenanceOrder] = field(default_factory=list)
    report_drafts: list[MaintenanceReportDraft] = field(default_factory=list)
    reports: list[MaintenanceReport] = field(default_factory=list)
    registrations: list[RegistrationDraft] = field(default_factory=list)
    users: list[User] = field(default_factory=list)

    @classmethod
    def seeded(cls) -> "MemoryStore":
        """Cria store com os dados de exemplo."""
        return cls(
            clients=seed.sample_clients(),
            bess_systems=seed.sample_bess_systems(),
            technicians=seed.sample_technicians(),
            maintenance_orders=seed.sample_maintenance_orders(),
        )


@lru_cache
def get_memory_store() -> MemoryStore:
    """Store único do processo."""
    return MemoryStore.seeded()
