"""
Modelos de sistemas BESS e das leituras do dashboard.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class BESSSystem:
    """
    Sistema de armazenamento de energia em baterias.

    Os sistemas de exemplo trazem apenas os campos básicos; os atributos
    elétricos vêm do formulário de cadastro.
    """

    id: str
    manufacturer: str
    model: str
    serial_number: str
    capacity: float  # kWh

    voltage: float | None = None  # V
    battery_capacity: float | None = None  # Ah
    cell_type: str | None = None
    power: float | None = None  # kW
    installation_address: str | None = None
    energy_source: str = "Solar"
    acquisition_value: Decimal | None = None  # R$

    @property
    def label(self) -> str:
        """Texto exibido nos selects: fabricante + modelo."""
        return f"{self.manufacturer} {self.model}"

    def __repr__(self) -> str:
        return f"<BESSSystem(id={self.id}, label='{self.label}')>"


@dataclass(frozen=True)
class DashboardReading:
    """Leitura diária de um sistema BESS."""

    date: date
    energy_used: int  # kWh
    energy_injected: int  # kWh
    voltage: int  # V
    current: int  # A
    battery_percentage: int
    financial_gain: int  # R$
