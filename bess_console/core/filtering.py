"""
Filtro, ordenação e paginação em memória.

Mesma lógica das tabelas do console (clientes, sistemas BESS e ordens de
manutenção): busca textual, filtros categóricos e fatiamento em páginas.
"""

import enum
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T")

# Campo de busca: nome do atributo ou função que devolve o texto
SearchField = str | Callable[[Any], str | None]

ALL = "all"


class SortOrder(str, enum.Enum):
    """Direção de ordenação."""

    ASC = "asc"
    DESC = "desc"


def _field_text(record: Any, field: SearchField) -> str | None:
    if callable(field):
        return field(record)
    return getattr(record, field, None)


def _value_of(record: Any, field: str) -> Any:
    value = getattr(record, field, None)
    if isinstance(value, enum.Enum):
        return value.value
    return value


def filter_records(
    records: Iterable[T],
    search: str | None = None,
    search_fields: Sequence[SearchField] = ("name",),
    exact: Mapping[str, Any] | None = None,
) -> list[T]:
    """
    Filtra registros preservando a ordem original.

    `search` casa (sem diferenciar maiúsculas) se qualquer campo de
    `search_fields` contiver o termo. Cada item de `exact` exige igualdade;
    valores None, "" ou "all" desligam o filtro.
    """
    term = (search or "").strip().lower()
    active = {
        field: (value.value if isinstance(value, enum.Enum) else value)
        for field, value in (exact or {}).items()
        if value not in (None, "", ALL)
    }

    result = []
    for record in records:
        if any(_value_of(record, field) != value for field, value in active.items()):
            continue
        if term:
            texts = (_field_text(record, field) for field in search_fields)
            if not any(text and term in text.lower() for text in texts):
                continue
        result.append(record)
    return result


def sort_records(
    records: Iterable[T],
    key: str | Callable[[T], Any],
    order: SortOrder = SortOrder.DESC,
) -> list[T]:
    """Ordena por um campo numérico (ordenação estável)."""
    key_func = key if callable(key) else (lambda record: getattr(record, key))
    return sorted(records, key=key_func, reverse=order == SortOrder.DESC)


@dataclass(frozen=True)
class Page(Generic[T]):
    """Uma página de resultados."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @property
    def pages(self) -> int:
        return count_pages(self.total, self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def start_index(self) -> int:
        """Posição (1-based) do primeiro item, 0 se a página está vazia."""
        if not self.items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1


def count_pages(total: int, page_size: int) -> int:
    """ceil(total / page_size)."""
    if page_size <= 0:
        raise ValueError("page_size deve ser maior que zero")
    return math.ceil(total / page_size)


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Limita o índice da página a [1, max(páginas, 1)]."""
    return min(max(page, 1), max(count_pages(total, page_size), 1))


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Fatia `items` na página pedida, com o índice já limitado."""
    total = len(items)
    current = clamp_page(page, total, page_size)
    start = (current - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total=total,
        page=current,
        page_size=page_size,
    )
