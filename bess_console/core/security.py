"""
Módulo de segurança: regras de força de senha e hashing.
"""

import re
from dataclasses import dataclass

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

PASSWORD_MIN_LENGTH = 8
SPECIAL_CHARS_PATTERN = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

# Textos exibidos no checklist do formulário de senha
PASSWORD_RULE_LABELS = {
    "min_length": "No mínimo 8 caracteres",
    "has_uppercase": "Uma letra maiúscula",
    "has_lowercase": "Uma letra minúscula",
    "has_special_char": "Um caractere especial",
    "has_number": "Um algarismo numérico",
}


@dataclass(frozen=True)
class PasswordStrength:
    """Resultado de cada regra de senha, usado no checklist da tela."""

    min_length: bool
    has_uppercase: bool
    has_lowercase: bool
    has_special_char: bool
    has_number: bool

    @property
    def is_valid(self) -> bool:
        return all(
            (
                self.min_length,
                self.has_uppercase,
                self.has_lowercase,
                self.has_special_char,
                self.has_number,
            )
        )

    def failed_rules(self) -> list[str]:
        """Lista os textos das regras não atendidas."""
        return [
            label
            for rule, label in PASSWORD_RULE_LABELS.items()
            if not getattr(self, rule)
        ]


def check_password_strength(password: str) -> PasswordStrength:
    """
    Avalia as cinco regras de senha.

    A confirmação da senha é verificada à parte, ver `passwords_match`.
    """
    return PasswordStrength(
        min_length=len(password) >= PASSWORD_MIN_LENGTH,
        has_uppercase=re.search(r"[A-Z]", password) is not None,
        has_lowercase=re.search(r"[a-z]", password) is not None,
        has_special_char=SPECIAL_CHARS_PATTERN.search(password) is not None,
        has_number=re.search(r"[0-9]", password) is not None,
    )


def passwords_match(password: str, confirm_password: str) -> bool:
    """Confirmação precisa ser igual e não vazia."""
    return password != "" and password == confirm_password


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica se a senha em texto plano corresponde ao hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Gera hash bcrypt da senha."""
    return pwd_context.hash(password)
