"""
Repository base com operações CRUD genéricas sobre listas em memória.
"""

from dataclasses import replace
from typing import Any, Generic, TypeVar

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Uso:
        class ClientRepository(BaseRepository[Client]):
            def __init__(self, store: MemoryStore):
                super().__init__(store.clients)
    """

    def __init__(self, records: list[ModelType]):
        self.records = records

    def get_by_id(self, id: str) -> ModelType | None:
        """Busca entidade por ID."""
        return next((r for r in self.records if r.id == id), None)

    def get_all(self) -> list[ModelType]:
        """Lista todas as entidades na ordem de inserção."""
        return list(self.records)

    def add(self, instance: ModelType) -> ModelType:
        """Adiciona entidade ao final da coleção."""
        self.records.append(instance)
        return instance

    def update(self, id: str, **kwargs: Any) -> ModelType | None:
        """Substitui a entidade por uma cópia com os campos alterados."""
        for index, instance in enumerate(self.records):
            if instance.id == id:
                updated = replace(instance, **kwargs)
                self.records[index] = updated
                return updated
        return None

    def delete(self, id: str) -> bool:
        """Remove entidade (hard delete)."""
        instance = self.get_by_id(id)
        if instance is None:
            return False
        self.records.remove(instance)
        return True


class SequentialIdRepository(BaseRepository[ModelType]):
    """
    Repository que gera IDs `prefixo + (maior número existente + 1)`.

    Não é seguro para edições concorrentes; o console tem um único cliente.
    """

    id_prefix = ""

    def next_id(self) -> str:
        numbers = [0]
        for record in self.records:
            suffix = record.id[len(self.id_prefix):] if record.id.startswith(self.id_prefix) else ""
            if suffix.isdigit():
                numbers.append(int(suffix))
        return f"{self.id_prefix}{max(numbers) + 1}"
