"""
Testes para o endpoint de clientes.
"""
import pytest
from httpx import AsyncClient

from bess_console.db.store import MemoryStore


@pytest.mark.asyncio
async def test_list_clientes_seeded(client: AsyncClient):
    """Testa listagem dos clientes de exemplo."""
    response = await client.get("/api/v1/clientes")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["total"] == 4
    assert data["pages"] == 1
    assert [c["name"] for c in data["data"]] == [
        "João Silva",
        "Empresa ABC Ltda",
        "Maria Souza",
        "Tech Solutions S.A.",
    ]


@pytest.mark.asyncio
async def test_create_cliente(client: AsyncClient, store: MemoryStore):
    """Testa criação de cliente."""
    response = await client.post(
        "/api/v1/clientes",
        json={"name": "  Ana Lima ", "document_type": "cpf", "document_number": "111.222.333-44"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["data"] == {
        "id": "5",
        "name": "Ana Lima",
        "document_type": "cpf",
        "document_number": "111.222.333-44",
    }
    assert len(store.clients) == 5


@pytest.mark.asyncio
async def test_create_cliente_empty_document(client: AsyncClient, store: MemoryStore):
    """Documento vazio não adiciona cliente."""
    response = await client.post(
        "/api/v1/clientes",
        json={"name": "João", "document_type": "cpf", "document_number": ""},
    )
    assert response.status_code == 422
    assert response.json()["error"]["errors"]
    assert len(store.clients) == 4


@pytest.mark.asyncio
async def test_create_cliente_invalid_cnpj(client: AsyncClient, store: MemoryStore):
    response = await client.post(
        "/api/v1/clientes",
        json={"name": "Empresa X", "document_type": "cnpj", "document_number": "123.456.789-00"},
    )
    assert response.status_code == 422
    assert "CNPJ deve conter 14 dígitos" in response.json()["error"]["errors"][0]["message"]
    assert len(store.clients) == 4


@pytest.mark.asyncio
async def test_id_after_delete_does_not_collide(client: AsyncClient):
    await client.delete("/api/v1/clientes/2")
    response = await client.post(
        "/api/v1/clientes",
        json={"name": "Novo", "document_type": "cpf", "document_number": "00000000000"},
    )
    assert response.json()["data"]["id"] == "5"


@pytest.mark.asyncio
async def test_get_cliente_not_found(client: AsyncClient):
    """Testa busca de cliente inexistente."""
    response = await client.get("/api/v1/clientes/999")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_search_clientes(client: AsyncClient):
    """Testa busca de clientes por nome."""
    response = await client.get("/api/v1/clientes", params={"search": "maria"})
    data = response.json()
    assert data["total"] == 1
    assert data["data"][0]["name"] == "Maria Souza"


@pytest.mark.asyncio
@pytest.mark.parametrize("document_type, ids", [("cpf", ["1", "3"]), ("cnpj", ["2", "4"]), ("all", ["1", "2", "3", "4"])])
async def test_filter_by_document_type(client: AsyncClient, document_type, ids):
    response = await client.get("/api/v1/clientes", params={"document_type": document_type})
    assert [c["id"] for c in response.json()["data"]] == ids


@pytest.mark.asyncio
async def test_invalid_document_type_filter(client: AsyncClient):
    response = await client.get("/api/v1/clientes", params={"document_type": "rg"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_pagination_of_five(client: AsyncClient):
    for i in range(3):
        await client.post(
            "/api/v1/clientes",
            json={"name": f"Cliente {i}", "document_type": "cpf", "document_number": "12345678900"},
        )

    response = await client.get("/api/v1/clientes", params={"page": 2})
    data = response.json()
    assert data["total"] == 7
    assert data["pages"] == 2
    assert data["page"] == 2
    assert [c["id"] for c in data["data"]] == ["6", "7"]
    assert (data["start_index"], data["end_index"]) == (6, 7)

    response = await client.get("/api/v1/clientes", params={"page": 10})
    assert response.json()["page"] == 2


@pytest.mark.asyncio
async def test_update_cliente(client: AsyncClient, store: MemoryStore):
    response = await client.put(
        "/api/v1/clientes/3",
        json={"name": "Maria Souza Lima", "document_type": "cpf", "document_number": "987.654.321-00"},
    )
    assert response.status_code == 200
    assert store.clients[2].name == "Maria Souza Lima"


@pytest.mark.asyncio
async def test_update_cliente_invalid_keeps_record(client: AsyncClient, store: MemoryStore):
    response = await client.put(
        "/api/v1/clientes/3",
        json={"name": "   ", "document_type": "cpf", "document_number": "987.654.321-00"},
    )
    assert response.status_code == 422
    assert store.clients[2].name == "Maria Souza"


@pytest.mark.asyncio
async def test_delete_cliente(client: AsyncClient, store: MemoryStore):
    response = await client.delete("/api/v1/clientes/1")
    assert response.status_code == 200
    assert [c.id for c in store.clients] == ["2", "3", "4"]

    response = await client.delete("/api/v1/clientes/1")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_clientes_require_administrator(technician_client: AsyncClient):
    response = await technician_client.get("/api/v1/clientes")
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_PERMISSIONS"


@pytest.mark.asyncio
async def test_clientes_require_session(unauthenticated_client: AsyncClient):
    response = await unauthenticated_client.get("/api/v1/clientes")
    assert response.status_code == 401
