"""
Service do cadastro de usuários.

Assistente de duas etapas: criação de senha e dados pessoais.
"""

from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from bess_console.core.config import settings
from bess_console.core.exceptions import (
    BusinessRuleError,
    PasswordMismatchError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
    ValidationError,
    WeakPasswordError,
    WizardAlreadySubmittedError,
)
from bess_console.core.filtering import Page, paginate
from bess_console.core.security import (
    check_password_strength,
    get_password_hash,
    passwords_match,
)
from bess_console.core.wizard import StepWizard, WizardStep
from bess_console.db.store import MemoryStore
from bess_console.models.user import RegistrationDraft, Role, User
from bess_console.repositories.user_repository import (
    RegistrationRepository,
    UserRepository,
)
from bess_console.schemas.base import field_errors
from bess_console.schemas.user import (
    DETAILS_SCHEMAS,
    PasswordCreation,
    RegistrationResponse,
    RegistrationStart,
)

logger = structlog.get_logger()

REGISTRATION_STEPS = (
    WizardStep("senha", "Criação de senha", ("password", "confirm_password")),
    WizardStep("dados", "Dados pessoais"),
)


class RegistrationService:
    """Service para o assistente de cadastro e a lista de usuários."""

    def __init__(self, store: MemoryStore):
        self._users = UserRepository(store)
        self._registrations = RegistrationRepository(store)

    @staticmethod
    def to_response(draft: RegistrationDraft) -> RegistrationResponse:
        return RegistrationResponse(
            id=draft.id,
            email=draft.email,
            user_type=draft.user_type,
            current_step=draft.wizard.current,
            step=draft.wizard.current_step.key,
            progress=draft.wizard.progress,
            password_defined=draft.hashed_password is not None,
            completed=draft.completed,
        )

    def start(self, data: RegistrationStart) -> RegistrationDraft:
        """Inicia o cadastro; e-mail já cadastrado é conflito."""
        if self._users.get_by_email(data.email):
            raise ResourceAlreadyExistsError("Usuário", "email", data.email)

        draft = self._registrations.add(
            RegistrationDraft(
                id=self._registrations.next_id(),
                email=data.email,
                user_type=data.user_type,
                wizard=StepWizard(REGISTRATION_STEPS),
            )
        )
        logger.info("Cadastro iniciado", registration_id=draft.id, user_type=data.user_type.value)
        return draft

    def get(self, registration_id: str) -> RegistrationDraft:
        draft = self._registrations.get_by_id(registration_id)
        if draft is None:
            raise ResourceNotFoundError("Cadastro", registration_id)
        return draft

    def _open(self, registration_id: str) -> RegistrationDraft:
        draft = self.get(registration_id)
        if draft.completed:
            raise WizardAlreadySubmittedError(registration_id)
        return draft

    def define_password(self, registration_id: str, data: PasswordCreation) -> RegistrationDraft:
        """
        Etapa de senha.

        Exige as cinco regras e a confirmação; avança para os dados.
        """
        draft = self._open(registration_id)

        strength = check_password_strength(data.password)
        if not strength.is_valid:
            raise WeakPasswordError(strength.failed_rules())
        if not passwords_match(data.password, data.confirm_password):
            raise PasswordMismatchError()

        draft.hashed_password = get_password_hash(data.password)
        draft.wizard.next()
        return draft

    def previous_step(self, registration_id: str) -> RegistrationDraft:
        draft = self._open(registration_id)
        draft.wizard.previous()
        return draft

    def complete(self, registration_id: str, details: dict[str, Any]) -> User:
        """Finaliza o cadastro com os dados pessoais do tipo escolhido."""
        draft = self._open(registration_id)
        draft.wizard.require_last_step()
        if draft.hashed_password is None:
            raise BusinessRuleError("Defina a senha antes dos dados pessoais", rule="PASSWORD_REQUIRED")

        schema = DETAILS_SCHEMAS[draft.user_type]
        try:
            validated = schema.model_validate(details)
        except PydanticValidationError as e:
            raise ValidationError("Dados pessoais inválidos", errors=field_errors(e)) from e

        # O e-mail pode ter sido cadastrado por outro convite no meio tempo
        if self._users.get_by_email(draft.email):
            raise ResourceAlreadyExistsError("Usuário", "email", draft.email)

        user = self._users.add(
            User(
                id=self._users.next_id(),
                email=draft.email,
                role=draft.user_type.role,
                hashed_password=draft.hashed_password,
                **validated.model_dump(),
            )
        )
        draft.completed = True

        logger.info("Usuário cadastrado", user_id=user.id, role=user.role.value)
        return user

    def list_users(
        self,
        search: str | None = None,
        role: Role | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> Page[User]:
        users = self._users.search(search, role)
        return paginate(users, page, page_size or settings.PAGE_SIZE)
