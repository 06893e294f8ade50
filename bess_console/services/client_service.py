"""
Service do Cliente.
"""

import structlog

from bess_console.core.config import settings
from bess_console.core.exceptions import ResourceNotFoundError
from bess_console.core.filtering import Page, paginate
from bess_console.db.store import MemoryStore
from bess_console.models.client import Client, DocumentType
from bess_console.repositories.client_repository import ClientRepository
from bess_console.schemas.client import ClientCreate, ClientUpdate

logger = structlog.get_logger()


class ClientService:
    """
    Service para operações com Cliente.

    Os dados chegam já validados pelos schemas; registros inválidos
    nunca alcançam o store.
    """

    def __init__(self, store: MemoryStore):
        self._repo = ClientRepository(store)

    def create(self, dados: ClientCreate) -> Client:
        """Cria cliente com ID `maior ID + 1`."""
        client = self._repo.add(Client(id=self._repo.next_id(), **dados.model_dump()))
        logger.info("Cliente adicionado", client_id=client.id, document_type=client.document_type.value)
        return client

    def get(self, client_id: str) -> Client:
        """Busca cliente por ID."""
        client = self._repo.get_by_id(client_id)
        if client is None:
            raise ResourceNotFoundError("Cliente", client_id)
        return client

    def search(
        self,
        search: str | None = None,
        document_type: DocumentType | str | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> Page[Client]:
        """Filtra por nome e tipo de documento e devolve a página pedida."""
        clients = self._repo.search(search, document_type)
        return paginate(clients, page, page_size or settings.PAGE_SIZE)

    def update(self, client_id: str, dados: ClientUpdate) -> Client:
        """Atualiza dados do cliente."""
        client = self._repo.update(client_id, **dados.model_dump())
        if client is None:
            raise ResourceNotFoundError("Cliente", client_id)
        logger.info("Cliente atualizado", client_id=client_id)
        return client

    def delete(self, client_id: str) -> None:
        """Exclui cliente (não pode ser desfeito)."""
        if not self._repo.delete(client_id):
            raise ResourceNotFoundError("Cliente", client_id)
        logger.info("Cliente excluído", client_id=client_id)
