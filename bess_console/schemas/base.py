"""
Schemas base compartilhados.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic import ValidationError as PydanticValidationError

from bess_console.core.filtering import Page

T = TypeVar("T")


class BaseSchema(BaseModel):
    """Schema base com configurações padrão."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class APIResponse(BaseModel, Generic[T]):
    """
    Resposta padronizada da API.

    Exemplo de uso:
        return APIResponse(success=True, data=client)
    """

    success: bool
    data: T | None = None
    message: str | None = None
    redirect_to: str | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    """Resposta paginada."""

    success: bool = True
    data: list[T]
    total: int
    page: int
    page_size: int

    @computed_field
    @property
    def pages(self) -> int:
        """Calcula número total de páginas."""
        if self.page_size == 0:
            return 0
        return (self.total + self.page_size - 1) // self.page_size

    @computed_field
    @property
    def start_index(self) -> int:
        """Primeira posição exibida ("Mostrando X a Y de N")."""
        if not self.data:
            return 0
        return (self.page - 1) * self.page_size + 1

    @computed_field
    @property
    def end_index(self) -> int:
        if not self.data:
            return 0
        return self.start_index + len(self.data) - 1

    @classmethod
    def from_page(cls, page: Page, data: list[T]) -> "PaginatedResponse[T]":
        """Monta a resposta a partir de uma página já fatiada."""
        return cls(
            data=data,
            total=page.total,
            page=page.page,
            page_size=page.page_size,
        )


def field_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Converte erros do pydantic em `{"field", "message"}` por campo."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__root__",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
