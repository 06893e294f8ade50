"""
Repository do Cliente.
"""

from bess_console.core.filtering import filter_records
from bess_console.db.store import MemoryStore
from bess_console.models.client import Client, DocumentType
from bess_console.repositories.base import SequentialIdRepository


class ClientRepository(SequentialIdRepository[Client]):
    """Repository para operações com Cliente."""

    def __init__(self, store: MemoryStore):
        super().__init__(store.clients)

    def search(
        self,
        query: str | None = None,
        document_type: DocumentType | str | None = None,
    ) -> list[Client]:
        """Busca clientes por nome e tipo de documento."""
        return filter_records(
            self.records,
            search=query,
            search_fields=("name",),
            exact={"document_type": document_type},
        )
