"""
Modelos de ordens e relatórios de manutenção.

Ordens referenciam sistema BESS e técnico apenas pelo ID; a resolução
acontece por busca nas listas do store e pode não encontrar o registro.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bess_console.core.wizard import StepWizard


class MaintenanceType(str, enum.Enum):
    """Tipo de manutenção."""

    PREVENTIVA = "preventiva"
    CORRETIVA = "corretiva"


class EquipmentStatus(str, enum.Enum):
    """Estado observado na inspeção visual."""

    OTIMO = "otimo"
    RAZOAVEL = "razoavel"
    DETERIORADO = "deteriorado"
    FORA_FUNCIONAMENTO = "fora_funcionamento"


@dataclass
class Technician:
    """Técnico que pode ser designado para uma ordem."""

    id: str
    name: str


@dataclass(frozen=True)
class Reference:
    """Referência resolvida para outro registro."""

    id: str
    label: str


@dataclass
class MaintenanceOrder:
    """Ordem de manutenção."""

    id: str
    bess_system_id: str
    technician_id: str
    created_at: datetime

    def __repr__(self) -> str:
        return (
            f"<MaintenanceOrder(id={self.id}, bess={self.bess_system_id}, "
            f"technician={self.technician_id})>"
        )


@dataclass
class MaintenanceReportDraft:
    """Relatório em preenchimento, com o estado do assistente."""

    id: str
    order_id: str
    wizard: StepWizard
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)
    submitted: bool = False


@dataclass
class MaintenanceReport:
    """Relatório enviado e validado."""

    id: str
    order_id: str
    data: dict[str, Any]
    submitted_at: datetime
    submitted_by: str
