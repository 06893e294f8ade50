"""
Modelo do Cliente.

Clientes podem ser pessoa física (CPF) ou jurídica (CNPJ).
"""

import enum
from dataclasses import dataclass


class DocumentType(str, enum.Enum):
    """Tipo de documento do cliente."""

    CPF = "cpf"
    CNPJ = "cnpj"

    @property
    def digits(self) -> int:
        """Quantidade de dígitos do documento."""
        return 11 if self is DocumentType.CPF else 14


@dataclass
class Client:
    """Cliente cadastrado no console."""

    id: str
    name: str
    document_type: DocumentType
    document_number: str

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.name}', document_type={self.document_type.value})>"
