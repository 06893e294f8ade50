"""
Testes para o endpoint de health check.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Testa endpoint de health check."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


@pytest.mark.asyncio
async def test_health_check_unauthenticated(unauthenticated_client: AsyncClient):
    """Health check deve funcionar sem sessão."""
    response = await unauthenticated_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_readiness_reports_store(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get("/api/v1/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["clients"] == 4
    assert data["checks"]["bess_systems"] == 5


@pytest.mark.asyncio
async def test_request_id_header(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get("/health")
    assert len(response.headers["x-request-id"]) == 8
