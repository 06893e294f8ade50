"""
Schemas dos sistemas BESS e do dashboard.
"""

import enum
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bess_console.core.filtering import SortOrder
from bess_console.schemas.base import BaseSchema


class BESSCreate(BaseSchema):
    """Formulário de cadastro de sistema BESS; todos os campos obrigatórios."""

    model_config = ConfigDict(str_strip_whitespace=True)

    manufacturer: str = Field(..., min_length=1, description="Fabricante")
    model: str = Field(..., min_length=1, description="Modelo")
    serial_number: str = Field(..., min_length=1, description="Número de série")
    capacity: float = Field(..., ge=0, description="Capacidade (kWh)")
    voltage: float = Field(..., ge=0, description="Tensão nominal (V)")
    battery_capacity: float = Field(..., ge=0, description="Capacidade da bateria (Ah)")
    cell_type: str = Field(..., min_length=1, description="Tipo de célula")
    power: float = Field(..., ge=0, description="Potência (kW)")
    installation_address: str = Field(..., min_length=1, description="Endereço de instalação")
    energy_source: str = Field("Solar", min_length=1, description="Fonte de energia")
    acquisition_value: Decimal = Field(..., ge=0, decimal_places=2, description="Valor de aquisição (R$)")


class BESSResponse(BaseSchema):
    """Schema de resposta do sistema BESS."""

    id: str
    manufacturer: str
    model: str
    serial_number: str
    capacity: float
    label: str
    voltage: float | None = None
    battery_capacity: float | None = None
    cell_type: str | None = None
    power: float | None = None
    installation_address: str | None = None
    energy_source: str
    acquisition_value: Decimal | None = None


# === Dashboard ===

class DashboardParameter(str, enum.Enum):
    """Grandezas filtráveis no dashboard."""

    VOLTAGE = "voltage"
    CURRENT = "current"
    BATTERY_PERCENTAGE = "battery_percentage"
    FINANCIAL_GAIN = "financial_gain"


class ValueCondition(str, enum.Enum):
    """Condição do filtro por valor."""

    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    BETWEEN = "between"
    EQUALS = "equals"


class DashboardFilters(BaseModel):
    """Filtros do dashboard BESS."""

    bess_system_id: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    parameter: DashboardParameter = DashboardParameter.CURRENT
    condition: ValueCondition = ValueCondition.GREATER_THAN
    value1: float | None = None
    value2: float | None = None
    sort: SortOrder = SortOrder.DESC

    @model_validator(mode="after")
    def validate_ranges(self) -> "DashboardFilters":
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("Data inicial maior que a data final")
        if self.condition == ValueCondition.BETWEEN and self.value1 is not None and self.value2 is None:
            raise ValueError("Condição 'between' exige value2")
        return self


class ReadingResponse(BaseSchema):
    """Leitura diária."""

    date: date
    energy_used: int
    energy_injected: int
    voltage: int
    current: int
    battery_percentage: int
    financial_gain: int


class DashboardSummary(BaseModel):
    """Totais exibidos nos cartões do dashboard."""

    total_energy_used: int
    total_energy_injected: int
    average_battery_percentage: int
    total_financial_gain: int
    peak_tariff: float
    off_peak_tariff: float


class DashboardResponse(BaseModel):
    """Dados do dashboard BESS."""

    bess_system: BESSResponse
    filters: DashboardFilters
    readings: list[ReadingResponse]
    summary: DashboardSummary
