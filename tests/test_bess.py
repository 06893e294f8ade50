"""
Testes dos sistemas BESS e do dashboard.
"""
from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from bess_console.db.store import MemoryStore
from bess_console.schemas.bess import DashboardFilters, DashboardParameter, ValueCondition
from bess_console.services.bess_service import (
    apply_dashboard_filters,
    generate_readings,
    summarize,
)

NEW_SYSTEM = {
    "manufacturer": "BYD",
    "model": "Battery-Box HVS",
    "serial_number": "BYD0001",
    "capacity": 12.8,
    "voltage": 409.6,
    "battery_capacity": 50,
    "cell_type": "LFP",
    "power": 10,
    "installation_address": "Rua das Flores, 100",
    "acquisition_value": "45000.00",
}

TODAY = date(2024, 3, 1)


@pytest.mark.asyncio
async def test_list_bess_first_page(client: AsyncClient):
    response = await client.get("/api/v1/bess")
    data = response.json()
    assert data["total"] == 5
    assert data["data"][0]["label"] == "Enel X EX-100"
    assert data["data"][0]["energy_source"] == "Solar"


@pytest.mark.asyncio
async def test_search_bess(client: AsyncClient):
    response = await client.get("/api/v1/bess", params={"search": "powerwall"})
    assert [s["id"] for s in response.json()["data"]] == ["bess3"]


@pytest.mark.asyncio
async def test_create_bess(client: AsyncClient, store: MemoryStore):
    response = await client.post("/api/v1/bess", json=NEW_SYSTEM)
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Sistema BESS cadastrado com sucesso!"
    assert data["data"]["id"] == "bess6"
    assert data["data"]["energy_source"] == "Solar"
    assert len(store.bess_systems) == 6


@pytest.mark.asyncio
async def test_create_bess_requires_every_field(client: AsyncClient, store: MemoryStore):
    payload = dict(NEW_SYSTEM)
    del payload["cell_type"]
    response = await client.post("/api/v1/bess", json=payload)
    assert response.status_code == 422
    assert len(store.bess_systems) == 5


@pytest.mark.asyncio
async def test_create_bess_rejects_negative_values(client: AsyncClient):
    response = await client.post("/api/v1/bess", json={**NEW_SYSTEM, "capacity": -1})
    assert response.status_code == 422
    assert response.json()["error"]["errors"][0]["field"] == "capacity"


@pytest.mark.asyncio
async def test_create_bess_duplicate_serial(client: AsyncClient):
    response = await client.post("/api/v1/bess", json={**NEW_SYSTEM, "serial_number": "EX10001"})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_get_bess(client: AsyncClient):
    response = await client.get("/api/v1/bess/bess2")
    assert response.json()["data"]["capacity"] == 10.5

    response = await client.get("/api/v1/bess/bess99")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_bess_requires_administrator(manager_client: AsyncClient):
    response = await manager_client.get("/api/v1/bess")
    assert response.status_code == 403


def test_readings_cover_window():
    readings = generate_readings("bess1", 30, TODAY)
    assert len(readings) == 30
    assert readings[0].date == TODAY - timedelta(days=30)
    assert readings[-1].date == TODAY - timedelta(days=1)
    assert all(220 <= r.voltage <= 239 for r in readings)
    assert all(0 <= r.battery_percentage <= 99 for r in readings)


def test_readings_are_stable_per_system():
    assert generate_readings("bess1", 30, TODAY) == generate_readings("bess1", 30, TODAY)
    assert generate_readings("bess1", 30, TODAY) != generate_readings("bess2", 30, TODAY)


def test_value_filter_and_default_sort():
    readings = generate_readings("bess1", 30, TODAY)
    filters = DashboardFilters(parameter=DashboardParameter.VOLTAGE, value1=230)
    result = apply_dashboard_filters(readings, filters)

    assert all(r.voltage > 230 for r in result)
    gains = [r.financial_gain for r in result]
    assert gains == sorted(gains, reverse=True)


def test_between_filter_accepts_reversed_bounds():
    readings = generate_readings("bess3", 30, TODAY)
    filters = DashboardFilters(
        parameter=DashboardParameter.CURRENT,
        condition=ValueCondition.BETWEEN,
        value1=40,
        value2=20,
    )
    assert all(20 <= r.current <= 40 for r in apply_dashboard_filters(readings, filters))


def test_date_range_filter():
    readings = generate_readings("bess1", 30, TODAY)
    start = TODAY - timedelta(days=10)
    filters = DashboardFilters(date_from=start, date_to=TODAY)
    result = apply_dashboard_filters(readings, filters)
    assert len(result) == 10
    assert all(r.date >= start for r in result)


def test_summary():
    readings = generate_readings("bess1", 30, TODAY)
    summary = summarize(readings)
    assert summary.total_financial_gain == sum(r.financial_gain for r in readings)
    assert summary.peak_tariff == 1.50
    assert summary.off_peak_tariff == 0.65

    empty = summarize([])
    assert empty.average_battery_percentage == 0
    assert empty.total_energy_used == 0


@pytest.mark.asyncio
async def test_dashboard_defaults_to_first_system(client: AsyncClient):
    response = await client.get("/api/v1/bess/dashboard")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["bess_system"]["id"] == "bess1"
    assert len(data["readings"]) == 30
    assert data["filters"]["sort"] == "desc"


@pytest.mark.asyncio
async def test_dashboard_ascending_sort(client: AsyncClient):
    response = await client.get("/api/v1/bess/dashboard", params={"bess_system_id": "bess4", "sort": "asc"})
    gains = [r["financial_gain"] for r in response.json()["data"]["readings"]]
    assert gains == sorted(gains)


@pytest.mark.asyncio
async def test_dashboard_invalid_range(client: AsyncClient):
    response = await client.get(
        "/api/v1/bess/dashboard",
        params={"date_from": "2024-02-10", "date_to": "2024-02-01"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_dashboard_between_needs_second_value(client: AsyncClient):
    response = await client.get(
        "/api/v1/bess/dashboard",
        params={"condition": "between", "value1": 10},
    )
    assert response.status_code == 422
