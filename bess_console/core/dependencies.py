"""
Dependências injetáveis do FastAPI.

Define dependências reutilizáveis para o store em memória, a sessão do
usuário e o controle de acesso por papel.
"""

from typing import Annotated

from fastapi import Depends, Request

from bess_console.core.config import settings
from bess_console.core.exceptions import (
    AuthenticationError,
    InsufficientPermissionsError,
)
from bess_console.core.session import SessionUser, parse_session
from bess_console.db.store import MemoryStore, get_memory_store
from bess_console.models.user import Role


def get_store() -> MemoryStore:
    """
    Dependency que fornece o store do processo.

    Uso:
        @router.get("/items")
        async def get_items(store: Store):
            ...
    """
    return get_memory_store()


async def get_session_user(request: Request) -> SessionUser:
    """
    Dependency que lê o marcador de sessão do cookie.

    Raises:
        AuthenticationError: cookie ausente
        InvalidSessionError: cookie corrompido
    """
    user = parse_session(request.cookies.get(settings.SESSION_COOKIE_NAME))
    if user is None:
        raise AuthenticationError()
    return user


def require_roles(*roles: Role):
    """
    Factory para criar dependency que exige papéis específicos.

    Uso:
        @router.post("", dependencies=[Depends(require_roles(Role.ADMINISTRATOR))])
        async def create_item(...):
            ...
    """
    async def role_checker(
        current_user: Annotated[SessionUser, Depends(get_session_user)],
    ) -> SessionUser:
        if current_user.role not in roles:
            raise InsufficientPermissionsError(
                f"Requer papel: {', '.join(r.value for r in roles)}"
            )
        return current_user

    return role_checker


# Type aliases para facilitar uso nas rotas
Store = Annotated[MemoryStore, Depends(get_store)]
CurrentUser = Annotated[SessionUser, Depends(get_session_user)]

# Role-based dependencies
AdminUser = Annotated[SessionUser, Depends(require_roles(Role.ADMINISTRATOR))]
MaintenanceUser = Annotated[
    SessionUser,
    Depends(require_roles(Role.TECHNICIAN, Role.TECHNICAL_MANAGER)),
]
