"""
Modelos de domínio do console BESS.

Registros simples mantidos em memória pelo store.
"""

from bess_console.models.bess import BESSSystem, DashboardReading
from bess_console.models.client import Client, DocumentType
from bess_console.models.maintenance import (
    EquipmentStatus,
    MaintenanceOrder,
    MaintenanceReport,
    MaintenanceReportDraft,
    MaintenanceType,
    Reference,
    Technician,
)
from bess_console.models.user import Cargo, RegistrationDraft, Role, User, UserType

__all__ = [
    # Cliente
    "Client",
    "DocumentType",
    # BESS
    "BESSSystem",
    "DashboardReading",
    # Manutenção
    "EquipmentStatus",
    "MaintenanceOrder",
    "MaintenanceReport",
    "MaintenanceReportDraft",
    "MaintenanceType",
    "Reference",
    "Technician",
    # Usuário
    "Cargo",
    "RegistrationDraft",
    "Role",
    "User",
    "UserType",
]
