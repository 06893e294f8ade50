"""
Schemas do Cliente.
"""

from pydantic import ConfigDict, Field, model_validator

from bess_console.models.client import DocumentType
from bess_console.schemas.base import BaseSchema


def _check_document(document_type: DocumentType, document_number: str) -> None:
    """CPF precisa de 11 dígitos e CNPJ de 14 (validação de formato)."""
    numbers = "".join(filter(str.isdigit, document_number))
    if len(numbers) != document_type.digits:
        raise ValueError(
            f"{document_type.value.upper()} deve conter {document_type.digits} dígitos"
        )


class ClientBase(BaseSchema):
    """Campos do formulário de cliente."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    document_type: DocumentType = DocumentType.CPF
    document_number: str = Field(..., min_length=1, max_length=18)

    @model_validator(mode="after")
    def validate_document(self) -> "ClientBase":
        _check_document(self.document_type, self.document_number)
        return self


class ClientCreate(ClientBase):
    """Schema para criação de cliente."""


class ClientUpdate(ClientBase):
    """Schema para edição de cliente (o diálogo reenvia todos os campos)."""


class ClientResponse(BaseSchema):
    """Schema de resposta do cliente."""

    id: str
    name: str
    document_type: DocumentType
    document_number: str
