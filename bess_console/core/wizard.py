"""
Assistente de etapas lineares.

Navegação livre para frente e para trás; apenas o envio final exige
estar na última etapa.
"""

from dataclasses import dataclass, field
from typing import Sequence

from bess_console.core.exceptions import WizardStepError


@dataclass(frozen=True)
class WizardStep:
    """Etapa do assistente e os campos que ela exibe."""

    key: str
    title: str
    fields: tuple[str, ...] = ()


@dataclass
class StepWizard:
    """Estado de um assistente: lista de etapas e índice atual."""

    steps: Sequence[WizardStep]
    current: int = field(default=0)

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError("Assistente precisa de ao menos uma etapa")
        self.current = min(max(self.current, 0), self.last_index)

    @property
    def last_index(self) -> int:
        return len(self.steps) - 1

    @property
    def is_first(self) -> bool:
        return self.current == 0

    @property
    def is_last(self) -> bool:
        return self.current == self.last_index

    @property
    def current_step(self) -> WizardStep:
        return self.steps[self.current]

    @property
    def progress(self) -> int:
        """Percentual do indicador de progresso (etapa atual inclusa)."""
        return round((self.current + 1) * 100 / len(self.steps))

    def next(self) -> int:
        self.current = min(self.current + 1, self.last_index)
        return self.current

    def previous(self) -> int:
        self.current = max(self.current - 1, 0)
        return self.current

    def go_to(self, index: int) -> int:
        self.current = min(max(index, 0), self.last_index)
        return self.current

    def require_last_step(self) -> None:
        """Garante que o envio só aconteça a partir da última etapa."""
        if not self.is_last:
            raise WizardStepError(self.current, self.last_index)
