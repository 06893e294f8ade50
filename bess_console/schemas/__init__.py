"""Schemas Pydantic para validação de request/response."""

from bess_console.schemas.base import (
    APIResponse,
    BaseSchema,
    PaginatedResponse,
)
from bess_console.schemas.bess import (
    BESSCreate,
    BESSResponse,
    DashboardFilters,
    DashboardParameter,
    DashboardResponse,
    DashboardSummary,
    ReadingResponse,
    ValueCondition,
)
from bess_console.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from bess_console.schemas.maintenance import (
    OrderCreate,
    OrderOptions,
    OrderResponse,
    OrderUpdate,
    ReferenceResponse,
)
from bess_console.schemas.navigation import MenuItem, RouteDecisionResponse
from bess_console.schemas.report import (
    REPORT_STEPS,
    MaintenanceReportData,
    MaintenanceReportPatch,
    ReportDraftResponse,
    ReportResponse,
    WizardStepResponse,
)
from bess_console.schemas.user import (
    AdministratorDetails,
    LoginRequest,
    LoginResponse,
    PasswordCreation,
    PasswordRecoveryRequest,
    PasswordStrengthRequest,
    PasswordStrengthResponse,
    RegistrationResponse,
    RegistrationStart,
    SessionUserResponse,
    TechnicalManagerDetails,
    TechnicianDetails,
    UserResponse,
)

__all__ = [
    # Base
    "APIResponse",
    "BaseSchema",
    "PaginatedResponse",
    # Cliente
    "ClientCreate",
    "ClientResponse",
    "ClientUpdate",
    # BESS
    "BESSCreate",
    "BESSResponse",
    "DashboardFilters",
    "DashboardParameter",
    "DashboardResponse",
    "DashboardSummary",
    "ReadingResponse",
    "ValueCondition",
    # Manutenção
    "OrderCreate",
    "OrderOptions",
    "OrderResponse",
    "OrderUpdate",
    "ReferenceResponse",
    # Relatório
    "REPORT_STEPS",
    "MaintenanceReportData",
    "MaintenanceReportPatch",
    "ReportDraftResponse",
    "ReportResponse",
    "WizardStepResponse",
    # Usuário
    "AdministratorDetails",
    "LoginRequest",
    "LoginResponse",
    "PasswordCreation",
    "PasswordRecoveryRequest",
    "PasswordStrengthRequest",
    "PasswordStrengthResponse",
    "RegistrationResponse",
    "RegistrationStart",
    "SessionUserResponse",
    "TechnicalManagerDetails",
    "TechnicianDetails",
    "UserResponse",
    # Navegação
    "MenuItem",
    "RouteDecisionResponse",
]
