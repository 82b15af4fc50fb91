"""Integration tests for Inventory API endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from inventory.api.routes import inventory_router
from inventory.stock.item_inventory import ItemInventory
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(inventory_router)
    return TestClient(app)


def _set_in_stock(client, item_id, in_stock):
    response = client.put(f"/inventory/{item_id}/in-stock", json={"in_stock": in_stock})
    assert response.status_code == 200
    return response.json()


class TestUpdateInStockEndpoint:
    def test_creates_record(self, client):
        data = _set_in_stock(client, 1, 10)
        assert data == {"item_id": 1, "in_stock": 10}
        assert current_domain.repository_for(ItemInventory).get(1).in_stock == 10

    def test_overwrites_record(self, client):
        _set_in_stock(client, 1, 10)
        data = _set_in_stock(client, 1, 3)
        assert data["in_stock"] == 3

    def test_negative_count_rejected(self, client):
        response = client.put("/inventory/1/in-stock", json={"in_stock": -1})
        assert response.status_code == 422


class TestGetItemInventoryEndpoint:
    def test_get(self, client):
        _set_in_stock(client, 1, 10)
        response = client.get("/inventory/1")
        assert response.status_code == 200
        assert response.json() == {"item_id": 1, "in_stock": 10}

    def test_missing(self, client):
        response = client.get("/inventory/5")
        assert response.status_code == 404
        assert response.json()["detail"] == "Inventory item with id 5 doesn't exist."


class TestRemoveItemInventoryEndpoint:
    def test_remove(self, client):
        _set_in_stock(client, 1, 10)
        response = client.delete("/inventory/1")
        assert response.status_code == 204
        assert client.get("/inventory/1").status_code == 404

    def test_remove_missing_is_no_op(self, client):
        response = client.delete("/inventory/5")
        assert response.status_code == 204


class TestSubmitOperationEndpoint:
    def test_decrease_success(self, client):
        _set_in_stock(client, 1, 1)
        _set_in_stock(client, 2, 1)
        response = client.post(
            "/inventory/operations",
            json={
                "operation": "DECREASE",
                "orderNumber": "order-1",
                "items": [{"itemId": 1, "quantity": 1}, {"itemId": 2, "quantity": 1}],
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "operation": "DECREASE",
            "orderNumber": "order-1",
            "status": "SUCCESS",
            "message": None,
        }
        assert client.get("/inventory/1").json()["in_stock"] == 0

    def test_decrease_failure_leaves_stock(self, client):
        _set_in_stock(client, 1, 1)
        _set_in_stock(client, 2, 0)
        response = client.post(
            "/inventory/operations",
            json={
                "operation": "DECREASE",
                "orderNumber": "order-1",
                "items": [{"itemId": 1, "quantity": 1}, {"itemId": 2, "quantity": 1}],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "FAIL"
        assert data["message"] == "Inventory item with id 2 is out of stock."
        assert client.get("/inventory/1").json()["in_stock"] == 1

    def test_increase(self, client):
        _set_in_stock(client, 1, 1)
        response = client.post(
            "/inventory/operations",
            json={"operation": "INCREASE", "orderNumber": "order-2", "items": [{"itemId": 1, "quantity": 4}]},
        )
        assert response.json()["status"] == "SUCCESS"
        assert client.get("/inventory/1").json()["in_stock"] == 5

    def test_empty_request_is_ignored(self, client):
        response = client.post(
            "/inventory/operations",
            json={"operation": "INCREASE", "orderNumber": "order-3", "items": []},
        )
        assert response.status_code == 202
        assert response.json() == {"status": "ignored"}

    def test_invalid_payload(self, client):
        response = client.post("/inventory/operations", json={"operation": "RESERVE", "orderNumber": "o"})
        assert response.status_code == 422

    def test_resubmitted_order_is_not_applied_twice(self, client):
        _set_in_stock(client, 1, 5)
        body = {"operation": "DECREASE", "orderNumber": "order-7", "items": [{"itemId": 1, "quantity": 2}]}

        first = client.post("/inventory/operations", json=body)
        second = client.post("/inventory/operations", json=body)

        assert first.json() == second.json()
        assert client.get("/inventory/1").json()["in_stock"] == 3
