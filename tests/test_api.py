# tests/test_api.py

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from staking_tracker.core.errors import StorageError
from staking_tracker.database.store import StakingStore


USDC_TOKEN = "0x94F0Fd09f425Be15C7Bc0575Aa71780A044039e3"


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Staking Tracker API"
    assert body["endpoints"]["by_address"] == "/staking/address/{address}"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "database_connected": True,
        "node_connected": True,
    }


def test_list_empty(client):
    response = client.get("/staking")
    assert response.status_code == 200
    assert response.json() == []


def test_update_then_list(client, registry):
    response = client.post("/staking/update")
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "All staking data updated successfully"
    assert [r["symbol"] for r in body["results"]] == list(registry.symbols)
    assert all(r["status"] == "updated" for r in body["results"])

    records = client.get("/staking").json()
    assert len(records) == len(registry)
    usdc = next(r for r in records if r["token_symbol"] == "USDC")
    assert usdc["protocol_id"] == "AaveV3_USDC"
    assert usdc["token_address"] == USDC_TOKEN.lower()
    assert usdc["apy"] == 5
    assert usdc["tvl"] == 1.0
    assert usdc["categories"] == ["Staking", "Stablecoin"]
    assert usdc["is_stablecoin"] is True


def test_update_reports_partial_failure(client, chain_reader, registry):
    chain_reader.fail(registry.get("WETH").staking_address)

    response = client.post("/staking/update")

    assert response.status_code == 200
    results = {r["symbol"]: r for r in response.json()["results"]}
    assert results["WETH"]["status"] == "failed"
    assert results["WETH"]["error"]
    assert results["UNI"]["status"] == "updated"


def test_get_by_protocol_id(client):
    client.post("/staking/update")

    response = client.get("/staking/AaveV3_USDC")
    assert response.status_code == 200
    records = response.json()
    assert len(records) == 1
    assert records[0]["token_symbol"] == "USDC"


def test_get_by_protocol_id_not_found(client):
    response = client.get("/staking/Nope_XYZ")
    assert response.status_code == 404
    assert response.json() == {"error": "Staking data not found"}


def test_get_by_address(client):
    client.post("/staking/update")

    response = client.get(f"/staking/address/{USDC_TOKEN}")
    assert response.status_code == 200
    assert response.json()["protocol_id"] == "AaveV3_USDC"

    response = client.get(f"/staking/address/{USDC_TOKEN.lower()}")
    assert response.status_code == 200


def test_get_by_address_not_found(client):
    response = client.get("/staking/address/0x0000000000000000000000000000000000000001")
    assert response.status_code == 404
    assert response.json() == {"error": "Staking data not found"}


def test_get_by_address_invalid(client):
    response = client.get("/staking/address/not-an-address")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid token address"}


def test_storage_failure_returns_500(client, container, monkeypatch):
    store = container.get(StakingStore)
    monkeypatch.setattr(store, "find_all",
                        AsyncMock(side_effect=StorageError("find_all", RuntimeError("db down"))))

    response = client.get("/staking")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch staking data"}


def test_update_failure_returns_500(client, container, monkeypatch):
    from staking_tracker.services.sync_service import StakingSyncService

    monkeypatch.setattr(StakingSyncService, "sync_all",
                        AsyncMock(side_effect=RuntimeError("boom")))

    response = client.post("/staking/update")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update staking data"}


def test_protocol_lookup_storage_failure_returns_500(client, container, monkeypatch):
    store = container.get(StakingStore)
    monkeypatch.setattr(store, "find_by_protocol_id",
                        AsyncMock(side_effect=StorageError("find_by_protocol_id", RuntimeError("db down"))))

    response = client.get("/staking/AaveV3_USDC")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch staking data"}


def test_address_lookup_storage_failure_returns_500(client, container, monkeypatch):
    store = container.get(StakingStore)
    monkeypatch.setattr(store, "find_by_address",
                        AsyncMock(side_effect=StorageError("find_by_address", RuntimeError("db down"))))

    response = client.get(f"/staking/address/{USDC_TOKEN}")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch staking data"}
