"""
Testes de login, sessão e recuperação de senha.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, role, redirect_to",
    [
        ("gerente@bess.com", "technical_manager", "/manutencoes"),
        ("tecnico@bess.com", "technician", "/manutencoes"),
        ("admin@bess.com", "administrator", "/dashboard"),
        ("joao@empresa.com", "administrator", "/dashboard"),
        ("gerente@bess", "technical_manager", "/manutencoes"),
        ("tecnico@campo.local", "technician", "/manutencoes"),
    ],
)
async def test_login_routes_by_role(unauthenticated_client: AsyncClient, email, role, redirect_to):
    response = await unauthenticated_client.post(
        "/api/v1/auth/login",
        json={"email": email, "password": "qualquer"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["data"]["user"] == {"email": email, "role": role}
    assert data["data"]["redirect_to"] == redirect_to
    assert data["redirect_to"] == redirect_to


@pytest.mark.asyncio
async def test_login_sets_session_cookie(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.post(
        "/api/v1/auth/login",
        json={"email": "admin@bess.com", "password": "x"},
    )
    assert response.headers["set-cookie"].startswith("user=")


@pytest.mark.asyncio
async def test_login_requires_both_fields(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.post(
        "/api/v1/auth/login",
        json={"email": "admin@bess.com", "password": ""},
    )
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["errors"][0]["field"] == "password"

    response = await unauthenticated_client.post("/api/v1/auth/login", json={"password": "x"})
    assert response.status_code == 422

    response = await unauthenticated_client.post(
        "/api/v1/auth/login",
        json={"email": "   ", "password": "x"},
    )
    assert response.status_code == 422
    assert response.json()["error"]["errors"][0]["field"] == "email"


@pytest.mark.asyncio
async def test_me_returns_session_user(manager_client: AsyncClient):
    response = await manager_client.get("/api/v1/auth/me")
    assert response.status_code == 200
    assert response.json()["data"] == {"email": "gerente@bess.com", "role": "technical_manager"}


@pytest.mark.asyncio
async def test_me_without_session(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get("/api/v1/auth/me")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_me_with_corrupt_session(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get(
        "/api/v1/auth/me",
        headers={"Cookie": "user=not-json"},
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_SESSION"


@pytest.mark.asyncio
async def test_logout_clears_cookie(client: AsyncClient):
    response = await client.post("/api/v1/auth/logout")
    assert response.status_code == 200
    assert response.json()["redirect_to"] == "/"
    assert 'user=""' in response.headers["set-cookie"]


@pytest.mark.asyncio
async def test_password_recovery_message(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.post(
        "/api/v1/auth/recuperar-senha",
        json={"email": "maria@empresa.com"},
    )
    assert response.status_code == 200
    assert response.json()["message"].startswith("Enviamos um link para maria@empresa.com")


@pytest.mark.asyncio
async def test_password_recovery_requires_email(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.post("/api/v1/auth/recuperar-senha", json={"email": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_password_strength_checklist(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.post(
        "/api/v1/auth/password-strength",
        json={"password": "senha123"},
    )
    assert response.json()["data"] == {
        "min_length": True,
        "has_uppercase": False,
        "has_lowercase": True,
        "has_special_char": False,
        "has_number": True,
        "is_valid": False,
    }
