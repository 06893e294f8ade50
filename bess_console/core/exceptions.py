"""
Exceções customizadas da aplicação.

Define hierarquia de exceções para tratamento consistente de erros.
"""

from typing import Any


class ConsoleException(Exception):
    """Exceção base do console BESS."""

    def __init__(
        self,
        message: str,
        code: str = "CONSOLE_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


# === Exceções de Sessão ===

class AuthenticationError(ConsoleException):
    """Sessão ausente ou inválida."""

    def __init__(self, message: str = "Sessão não encontrada"):
        super().__init__(message, code="AUTH_ERROR")


class InvalidSessionError(AuthenticationError):
    """Marcador de sessão corrompido (JSON inválido ou papel desconhecido)."""

    def __init__(self, reason: str):
        super().__init__(f"Sessão inválida: {reason}")
        self.code = "INVALID_SESSION"


# === Exceções de Autorização ===

class AuthorizationError(ConsoleException):
    """Erro de autorização/permissão."""

    def __init__(self, message: str = "Acesso negado"):
        super().__init__(message, code="AUTHORIZATION_ERROR")


class InsufficientPermissionsError(AuthorizationError):
    """Papel do usuário não tem acesso ao recurso."""

    def __init__(self, action: str):
        super().__init__(f"Permissão insuficiente para: {action}")
        self.code = "INSUFFICIENT_PERMISSIONS"


# === Exceções de Recursos ===

class ResourceNotFoundError(ConsoleException):
    """Recurso não encontrado."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str | None = None,
    ):
        message = f"{resource_type} não encontrado"
        if resource_id:
            message = f"{resource_type} com ID {resource_id} não encontrado"
        super().__init__(message, code="NOT_FOUND")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ResourceAlreadyExistsError(ConsoleException):
    """Recurso já existe (conflito)."""

    def __init__(
        self,
        resource_type: str,
        field: str,
        value: str,
    ):
        message = f"{resource_type} com {field}='{value}' já existe"
        super().__init__(message, code="ALREADY_EXISTS")
        self.resource_type = resource_type
        self.field = field
        self.value = value


# === Exceções de Validação ===

class ValidationError(ConsoleException):
    """Erro de validação de formulário."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.errors = errors or []


class WeakPasswordError(ValidationError):
    """Senha não atende aos requisitos mínimos."""

    def __init__(self, failed_rules: list[str]):
        super().__init__(
            "A senha não atende aos requisitos mínimos.",
            field="password",
            errors=[{"field": "password", "message": rule} for rule in failed_rules],
        )
        self.code = "WEAK_PASSWORD"


class PasswordMismatchError(ValidationError):
    """Confirmação diferente da senha."""

    def __init__(self):
        super().__init__("As senhas não conferem.", field="confirm_password")
        self.code = "PASSWORD_MISMATCH"


# === Exceções de Negócio ===

class BusinessRuleError(ConsoleException):
    """Violação de regra de negócio."""

    def __init__(self, message: str, rule: str | None = None):
        super().__init__(message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class WizardStepError(BusinessRuleError):
    """Ação do assistente disparada fora da etapa permitida."""

    def __init__(self, current_step: int, last_step: int):
        super().__init__(
            f"Envio permitido apenas na última etapa ({last_step}); etapa atual: {current_step}",
            rule="WIZARD_LAST_STEP_ONLY",
        )
        self.code = "WIZARD_STEP_ERROR"
        self.details = {"current_step": current_step, "last_step": last_step}


class WizardAlreadySubmittedError(BusinessRuleError):
    """Assistente já concluído não aceita mais alterações."""

    def __init__(self, draft_id: str):
        super().__init__(
            f"Rascunho {draft_id} já foi enviado",
            rule="WIZARD_ALREADY_SUBMITTED",
        )
        self.code = "WIZARD_ALREADY_SUBMITTED"
