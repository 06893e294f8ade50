"""
Testes da sessão e do guarda de rotas.
"""
import json

import pytest
from httpx import AsyncClient

from bess_console.core.exceptions import InvalidSessionError
from bess_console.core.session import (
    SessionUser,
    home_for_role,
    parse_session,
    resolve_route,
    role_for_email,
)
from bess_console.models.user import Role

ADMIN = SessionUser("admin@bess.com", Role.ADMINISTRATOR).to_json()
TECHNICIAN = SessionUser("tecnico@bess.com", Role.TECHNICIAN).to_json()
MANAGER = SessionUser("gerente@bess.com", Role.TECHNICAL_MANAGER).to_json()


@pytest.mark.parametrize(
    "email, role",
    [
        ("tecnico@bess.com", Role.TECHNICIAN),
        ("gerente@bess.com", Role.TECHNICAL_MANAGER),
        ("admin@bess.com", Role.ADMINISTRATOR),
        ("maria@empresa.com", Role.ADMINISTRATOR),
    ],
)
def test_role_for_email(email, role):
    assert role_for_email(email) == role


def test_home_for_role():
    assert home_for_role(Role.ADMINISTRATOR) == "/dashboard"
    assert home_for_role(Role.TECHNICIAN) == "/manutencoes"
    assert home_for_role(Role.TECHNICAL_MANAGER) == "/manutencoes"


def test_parse_session():
    assert parse_session(None) is None
    assert parse_session("") is None
    assert parse_session(ADMIN) == SessionUser("admin@bess.com", Role.ADMINISTRATOR)


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        json.dumps({"role": "administrator"}),
        json.dumps({"email": "x@y.com", "role": "superuser"}),
        json.dumps(["admin"]),
    ],
)
def test_corrupt_session_raises(raw):
    with pytest.raises(InvalidSessionError):
        parse_session(raw)


@pytest.mark.parametrize("path", ["/", "/recuperar-senha", "/cadastro-usuario"])
def test_public_routes_always_allowed(path):
    assert resolve_route(path, None).allowed is True
    assert resolve_route(path, TECHNICIAN).allowed is True


def test_unknown_route_is_not_found():
    decision = resolve_route("/nao-existe", ADMIN)
    assert decision.status_code == 404
    assert decision.allowed is False


@pytest.mark.parametrize("path", ["/dashboard", "/clientes", "/manutencoes", "/perfil"])
def test_protected_route_without_session_goes_to_login(path):
    decision = resolve_route(path, None)
    assert decision.allowed is False
    assert decision.redirect_to == "/"


def test_corrupt_session_goes_to_login():
    decision = resolve_route("/clientes", "{broken")
    assert decision.redirect_to == "/"


@pytest.mark.parametrize("raw", [TECHNICIAN, MANAGER])
@pytest.mark.parametrize("path", ["/dashboard", "/clientes", "/administradores", "/bess"])
def test_maintenance_roles_leave_general_pages(raw, path):
    decision = resolve_route(path, raw)
    assert decision.allowed is False
    assert decision.redirect_to == "/manutencoes"


@pytest.mark.parametrize("path", ["/manutencoes", "/manutencoes/maint1/relatorio"])
def test_administrator_leaves_maintenance_pages(path):
    decision = resolve_route(path, ADMIN)
    assert decision.redirect_to == "/dashboard"


def test_maintenance_roles_reach_report_page():
    decision = resolve_route("/manutencoes/maint2/relatorio", MANAGER)
    assert decision.allowed is True
    assert decision.title == "Relatório de Manutenção - Ordem maint2"


@pytest.mark.parametrize("raw", [ADMIN, TECHNICIAN, MANAGER])
def test_profile_is_shared(raw):
    assert resolve_route("/perfil", raw).allowed is True


@pytest.mark.asyncio
async def test_resolve_endpoint_uses_cookie(technician_client: AsyncClient):
    response = await technician_client.get("/api/v1/navegacao/resolve", params={"path": "/clientes"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["allowed"] is False
    assert data["redirect_to"] == "/manutencoes"


@pytest.mark.asyncio
async def test_resolve_endpoint_without_session(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get("/api/v1/navegacao/resolve", params={"path": "/bess"})
    assert response.json()["data"]["redirect_to"] == "/"


@pytest.mark.asyncio
async def test_menu_requires_session(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get("/api/v1/navegacao/menu")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "AUTH_ERROR"


@pytest.mark.asyncio
async def test_menu_items(client: AsyncClient):
    response = await client.get("/api/v1/navegacao/menu")
    paths = [item["path"] for item in response.json()["data"]]
    assert paths == ["/clientes", "/administradores", "/bess", "/manutencoes", "/perfil"]
