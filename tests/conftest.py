"""
Pytest fixtures para testes do console BESS.
"""
import os

# Sem latência simulada nos testes; precisa vir antes de importar a app
os.environ["SIMULATED_LATENCY_SECONDS"] = "0"

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from bess_console.core.config import settings
from bess_console.core.dependencies import get_store
from bess_console.core.session import SessionUser
from bess_console.db.store import MemoryStore
from bess_console.main import app
from bess_console.models.user import Role

ADMIN_EMAIL = "admin@bess.com"
TECHNICIAN_EMAIL = "tecnico@bess.com"
MANAGER_EMAIL = "gerente@bess.com"


def session_cookie(email: str, role: Role) -> dict[str, str]:
    """Marcador de sessão como o login grava."""
    return {settings.SESSION_COOKIE_NAME: SessionUser(email=email, role=role).to_json()}


@pytest.fixture
def store() -> MemoryStore:
    """Store semeado novo para cada teste."""
    return MemoryStore.seeded()


async def _client(store: MemoryStore, cookies: dict[str, str] | None = None) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies=cookies,
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP com sessão de administrador."""
    async for ac in _client(store, session_cookie(ADMIN_EMAIL, Role.ADMINISTRATOR)):
        yield ac


@pytest_asyncio.fixture
async def technician_client(store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP com sessão de técnico."""
    async for ac in _client(store, session_cookie(TECHNICIAN_EMAIL, Role.TECHNICIAN)):
        yield ac


@pytest_asyncio.fixture
async def manager_client(store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP com sessão de gerente técnico."""
    async for ac in _client(store, session_cookie(MANAGER_EMAIL, Role.TECHNICAL_MANAGER)):
        yield ac


@pytest_asyncio.fixture
async def unauthenticated_client(store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Cliente HTTP sem sessão."""
    async for ac in _client(store):
        yield ac
