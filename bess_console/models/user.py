"""
Modelo do Usuário do console.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime

from bess_console.core.wizard import StepWizard


class Role(str, enum.Enum):
    """Papéis de usuário guardados na sessão."""

    ADMINISTRATOR = "administrator"
    TECHNICIAN = "technician"
    TECHNICAL_MANAGER = "technical_manager"

    @property
    def is_maintenance(self) -> bool:
        """Papéis que trabalham nas ordens de manutenção."""
        return self in (Role.TECHNICIAN, Role.TECHNICAL_MANAGER)


class UserType(str, enum.Enum):
    """Tipo de cadastro escolhido no convite."""

    ADMIN = "admin"
    MANAGER = "manager"
    TECHNICIAN = "technician"

    @property
    def role(self) -> Role:
        return {
            UserType.ADMIN: Role.ADMINISTRATOR,
            UserType.MANAGER: Role.TECHNICAL_MANAGER,
            UserType.TECHNICIAN: Role.TECHNICIAN,
        }[self]


class Cargo(str, enum.Enum):
    """Cargos disponíveis nos formulários de cadastro."""

    ENGENHARIA = "Engenharia"
    TI = "TI"
    OBRAS_E_SERVICOS = "Obras e Serviços"
    PMO = "PMO"
    DIRETORIA = "Diretoria"
    OUTROS = "Outros"


@dataclass
class User:
    """Usuário cadastrado pelo assistente de cadastro."""

    id: str
    email: str
    name: str
    role: Role
    hashed_password: str
    phone: str
    address: str
    cargo: Cargo | None = None
    registration_code: str | None = None
    company: str | None = None
    is_3e_employee: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"


@dataclass
class RegistrationDraft:
    """Cadastro em andamento: etapa de senha, depois dados pessoais."""

    id: str
    email: str
    user_type: UserType
    wizard: StepWizard
    hashed_password: str | None = None
    completed: bool = False
