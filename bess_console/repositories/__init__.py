"""Repositories - camada de acesso ao store em memória."""

from bess_console.repositories.base import BaseRepository, SequentialIdRepository
from bess_console.repositories.bess_repository import BESSRepository
from bess_console.repositories.client_repository import ClientRepository
from bess_console.repositories.maintenance_repository import (
    MaintenanceOrderRepository,
    ReportDraftRepository,
    ReportRepository,
    TechnicianRepository,
)
from bess_console.repositories.user_repository import (
    RegistrationRepository,
    UserRepository,
)

__all__ = [
    # Base
    "BaseRepository",
    "SequentialIdRepository",
    # Entidades
    "BESSRepository",
    "ClientRepository",
    "MaintenanceOrderRepository",
    "RegistrationRepository",
    "ReportDraftRepository",
    "ReportRepository",
    "TechnicianRepository",
    "UserRepository",
]
