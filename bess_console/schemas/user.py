"""
Schemas do Usuário, sessão e cadastro.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from bess_console.models.user import Cargo, Role, UserType
from bess_console.schemas.base import BaseSchema


# === Schemas de Sessão ===

class LoginRequest(BaseSchema):
    """Schema de login; qualquer par e-mail/senha preenchido entra."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionUserResponse(BaseSchema):
    """Conteúdo do marcador de sessão."""

    email: str
    role: Role


class LoginResponse(BaseModel):
    """Resposta de login: sessão criada e página de destino."""

    user: SessionUserResponse
    redirect_to: str


class PasswordRecoveryRequest(BaseSchema):
    """Pedido de link de redefinição de senha."""

    email: EmailStr


class PasswordStrengthRequest(BaseModel):
    """Senha digitada, avaliada a cada tecla."""

    password: str = ""


class PasswordStrengthResponse(BaseSchema):
    """Checklist de requisitos da senha."""

    min_length: bool
    has_uppercase: bool
    has_lowercase: bool
    has_special_char: bool
    has_number: bool
    is_valid: bool


# === Schemas de Cadastro ===

class RegistrationStart(BaseSchema):
    """Início do cadastro a partir do convite."""

    email: EmailStr
    user_type: UserType = UserType.ADMIN


class PasswordCreation(BaseModel):
    """Etapa de criação de senha."""

    password: str
    confirm_password: str


class AdministratorDetails(BaseSchema):
    """Dados pessoais do administrador."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=20)
    address: str = Field(..., min_length=1)


class TechnicalManagerDetails(AdministratorDetails):
    """Dados do gerente técnico."""

    cargo: Cargo


class TechnicianDetails(BaseSchema):
    """Dados do técnico; cargo só é exigido para colaboradores da 3E."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: str = Field(..., min_length=1, max_length=255, description="Nome/Razão Social")
    registration_code: str = Field(..., min_length=1, description="Código de matrícula")
    address: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1, max_length=20)
    company: str = Field(..., min_length=1, description="Empresa associada")
    is_3e_employee: bool = False
    cargo: Cargo | None = None

    @model_validator(mode="after")
    def validate_cargo(self) -> "TechnicianDetails":
        if self.is_3e_employee and self.cargo is None:
            raise ValueError("Cargo é obrigatório para colaboradores da 3E")
        return self


DETAILS_SCHEMAS: dict[UserType, type[BaseSchema]] = {
    UserType.ADMIN: AdministratorDetails,
    UserType.MANAGER: TechnicalManagerDetails,
    UserType.TECHNICIAN: TechnicianDetails,
}


class RegistrationResponse(BaseSchema):
    """Estado do cadastro em andamento."""

    id: str
    email: str
    user_type: UserType
    current_step: int
    step: str
    progress: int
    password_defined: bool
    completed: bool


class UserResponse(BaseSchema):
    """Schema de resposta do usuário."""

    id: str
    email: str
    name: str
    role: Role
    phone: str
    address: str
    cargo: Cargo | None = None
    registration_code: str | None = None
    company: str | None = None
    is_3e_employee: bool
    created_at: datetime
