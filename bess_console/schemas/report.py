"""
Schemas do relatório de manutenção.

O relatório é preenchido ao longo de sete etapas e só é validado por
inteiro no envio. Imagens são referências opcionais (nome ou URL).
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.fields import FieldInfo

from bess_console.core.wizard import WizardStep
from bess_console.models.maintenance import EquipmentStatus, MaintenanceType
from bess_console.schemas.base import BaseSchema

NonNegative = Annotated[float, Field(ge=0)]
RequiredText = Annotated[str, Field(min_length=1)]
ImageRef = Optional[str]


class MaintenanceReportData(BaseModel):
    """Relatório completo, com todas as regras de envio."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    # Início
    maintenance_type: MaintenanceType
    reactive: NonNegative  # VAr
    date_time: datetime
    start_image: ImageRef = None

    # 1ª etapa - Inspeção Visual
    general_view_image: ImageRef = None
    general_view_status: RequiredText
    main_equipment_image: ImageRef = None
    main_equipment_status: EquipmentStatus
    electrical_connections_image: ImageRef = None
    electrical_connections: RequiredText
    ventilation_image: ImageRef = None
    ventilation_status: EquipmentStatus
    torque_values: RequiredText
    additional_observations_image: ImageRef = None
    additional_observations: str | None = None

    # 2ª etapa - Testes de Segurança
    test_equipment_image: ImageRef = None
    test_equipment: RequiredText
    isolation_test_image: ImageRef = None
    isolation_test_result: NonNegative
    grounding_test_image: ImageRef = None
    grounding_test_result: NonNegative
    input_current_image: ImageRef = None
    input_current: NonNegative
    output_current_image: ImageRef = None
    output_current: NonNegative
    input_voltage_image: ImageRef = None
    input_voltage: NonNegative
    output_voltage_image: ImageRef = None
    output_voltage: NonNegative
    protection_verification_image: ImageRef = None
    protection_verification: RequiredText

    # 3ª etapa - Inicialização
    bms_screen_image: ImageRef = None
    bms_parameters: RequiredText
    inverters_image: ImageRef = None
    inverters_operation: RequiredText
    control_system_image: ImageRef = None
    control_system: RequiredText
    communication_status: RequiredText
    programmed_parameters: RequiredText
    battery_initial_state: RequiredText

    # 4ª etapa - Testes Funcionais
    monitoring_screens_image: ImageRef = None
    monitoring_screens: RequiredText
    charge_discharge_graphs_image: ImageRef = None
    charge_discharge_graphs: RequiredText
    response_times_limits: RequiredText
    integration_other_sources: RequiredText

    # 5ª etapa - Supervisão
    scada_screens_image: ImageRef = None
    scada_screens: RequiredText
    automatic_reports_image: ImageRef = None
    automatic_reports: RequiredText
    log_events: RequiredText

    # 6ª etapa - Entrega Final
    participating_team: RequiredText
    test_schedules: RequiredText
    technician_signature: RequiredText
    manager_signature_image: ImageRef = None


# Valores iniciais dos campos numéricos ao abrir o relatório
REPORT_DEFAULTS: dict[str, Any] = {
    "reactive": 0,
    "isolation_test_result": 0,
    "grounding_test_result": 0,
    "input_current": 0,
    "output_current": 0,
    "input_voltage": 0,
    "output_voltage": 0,
}

REPORT_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        "inicio",
        "Início",
        ("maintenance_type", "reactive", "date_time", "start_image"),
    ),
    WizardStep(
        "inspecao_visual",
        "1ª etapa - Inspeção Visual",
        (
            "general_view_image", "general_view_status",
            "main_equipment_image", "main_equipment_status",
            "electrical_connections_image", "electrical_connections",
            "ventilation_image", "ventilation_status",
            "torque_values",
            "additional_observations_image", "additional_observations",
        ),
    ),
    WizardStep(
        "testes_seguranca",
        "2ª etapa - Testes de Segurança",
        (
            "test_equipment_image", "test_equipment",
            "isolation_test_image", "isolation_test_result",
            "grounding_test_image", "grounding_test_result",
            "input_current_image", "input_current",
            "output_current_image", "output_current",
            "input_voltage_image", "input_voltage",
            "output_voltage_image", "output_voltage",
            "protection_verification_image", "protection_verification",
        ),
    ),
    WizardStep(
        "inicializacao",
        "3ª etapa - Inicialização",
        (
            "bms_screen_image", "bms_parameters",
            "inverters_image", "inverters_operation",
            "control_system_image", "control_system",
            "communication_status", "programmed_parameters", "battery_initial_state",
        ),
    ),
    WizardStep(
        "testes_funcionais",
        "4ª etapa - Testes Funcionais",
        (
            "monitoring_screens_image", "monitoring_screens",
            "charge_discharge_graphs_image", "charge_discharge_graphs",
            "response_times_limits", "integration_other_sources",
        ),
    ),
    WizardStep(
        "supervisao",
        "5ª etapa - Supervisão",
        (
            "scada_screens_image", "scada_screens",
            "automatic_reports_image", "automatic_reports",
            "log_events",
        ),
    ),
    WizardStep(
        "entrega_final",
        "6ª etapa - Entrega Final",
        (
            "participating_team", "test_schedules",
            "technician_signature", "manager_signature_image",
        ),
    ),
)


class _PatchBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")


def _patch_annotation(info: FieldInfo) -> Any:
    # Texto obrigatório pode ficar vazio no rascunho; o envio cobra o preenchimento.
    if info.annotation is str:
        return Optional[str]
    return Optional[info.rebuild_annotation()]


# Mesmos campos e tipos do relatório, todos opcionais: usado no
# preenchimento parcial de cada etapa.
MaintenanceReportPatch = create_model(
    "MaintenanceReportPatch",
    __base__=_PatchBase,
    **{
        name: (_patch_annotation(info), None)
        for name, info in MaintenanceReportData.model_fields.items()
    },
)


class WizardStepResponse(BaseModel):
    """Etapa do indicador de progresso."""

    index: int
    key: str
    title: str
    fields: list[str]


class ReportDraftResponse(BaseSchema):
    """Estado do rascunho: etapa atual, progresso e valores preenchidos."""

    id: str
    order_id: str
    current_step: int
    step: WizardStepResponse
    steps: list[WizardStepResponse]
    progress: int
    is_first: bool
    is_last: bool
    submitted: bool
    data: dict[str, Any]
    created_at: datetime
    updated_at: datetime


class ReportResponse(BaseSchema):
    """Relatório enviado."""

    id: str
    order_id: str
    data: MaintenanceReportData
    submitted_at: datetime
    submitted_by: str
