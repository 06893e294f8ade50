"""
Schemas das ordens de manutenção.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bess_console.schemas.base import BaseSchema


class OrderBase(BaseSchema):
    """Sistema BESS e técnico são obrigatórios."""

    model_config = ConfigDict(str_strip_whitespace=True)

    bess_system_id: str = Field(..., min_length=1, description="ID do sistema BESS")
    technician_id: str = Field(..., min_length=1, description="ID do técnico responsável")


class OrderCreate(OrderBase):
    """Schema para criação de ordem."""


class OrderUpdate(OrderBase):
    """Schema para edição de ordem."""


class ReferenceResponse(BaseSchema):
    """Registro referenciado pela ordem."""

    id: str
    label: str


class OrderResponse(BaseModel):
    """
    Ordem com as referências resolvidas.

    `bess_system` e `technician` são null quando o ID não existe nas listas.
    """

    id: str
    bess_system_id: str
    technician_id: str
    created_at: datetime
    bess_system: ReferenceResponse | None = None
    technician: ReferenceResponse | None = None


class OrderOptions(BaseModel):
    """Opções dos selects de sistema BESS e técnico."""

    bess_systems: list[ReferenceResponse]
    technicians: list[ReferenceResponse]
