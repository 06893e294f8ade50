"""
Services Layer.

Camada de lógica de negócio do console BESS.
"""

from bess_console.services.auth_service import AuthService
from bess_console.services.bess_service import BESSService
from bess_console.services.client_service import ClientService
from bess_console.services.maintenance_service import MaintenanceOrderService
from bess_console.services.registration_service import RegistrationService
from bess_console.services.report_service import MaintenanceReportService

__all__ = [
    "AuthService",
    "BESSService",
    "ClientService",
    "MaintenanceOrderService",
    "MaintenanceReportService",
    "RegistrationService",
]
