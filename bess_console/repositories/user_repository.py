"""
Repositories do Usuário e dos cadastros em andamento.
"""

from bess_console.core.filtering import filter_records
from bess_console.db.store import MemoryStore
from bess_console.models.user import RegistrationDraft, Role, User
from bess_console.repositories.base import SequentialIdRepository


class UserRepository(SequentialIdRepository[User]):
    """Repository para operações com Usuário."""

    id_prefix = "user"

    def __init__(self, store: MemoryStore):
        super().__init__(store.users)

    def get_by_email(self, email: str) -> User | None:
        """Busca usuário por email (sem diferenciar maiúsculas)."""
        email = email.lower()
        return next((u for u in self.records if u.email.lower() == email), None)

    def search(self, query: str | None = None, role: Role | None = None) -> list[User]:
        """Busca por nome ou e-mail, opcionalmente por papel."""
        return filter_records(
            self.records,
            search=query,
            search_fields=("name", "email"),
            exact={"role": role},
        )


class RegistrationRepository(SequentialIdRepository[RegistrationDraft]):
    """Cadastros iniciados pelo assistente."""

    id_prefix = "cad"

    def __init__(self, store: MemoryStore):
        super().__init__(store.registrations)
