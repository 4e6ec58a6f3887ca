"""Integration tests for cart endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.cart.api import cart_router

GUEST = {"X-Session-Id": "guest-1"}


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    register_exception_handlers(app)
    return TestClient(app)


class TestCartApi:
    def test_session_required(self, client):
        response = client.get("/cart")
        assert response.status_code == 400
        assert response.json()["detail"] == "Session required"

    def test_empty_cart(self, client):
        data = client.get("/cart", headers=GUEST).json()
        assert data == {"items": [], "item_count": 0, "subtotal": 0.0}

    def test_add_and_view(self, client, make_product):
        product_id = make_product()
        response = client.post("/cart/items", json={"product_id": product_id, "quantity": 2}, headers=GUEST)
        assert response.status_code == 201

        data = client.get("/cart", headers=GUEST).json()
        assert data["item_count"] == 2
        assert data["subtotal"] == 500.0
        assert data["items"][0]["product_name"] == "Stoneware Bowl"
        assert data["items"][0]["total"] == 500.0

    def test_count(self, client, make_product):
        product_id = make_product()
        client.post("/cart/items", json={"product_id": product_id, "quantity": 3}, headers=GUEST)
        assert client.get("/cart/count", headers=GUEST).json() == {"count": 3}

    def test_update_and_remove(self, client, make_product):
        product_id = make_product()
        item_id = client.post("/cart/items", json={"product_id": product_id}, headers=GUEST).json()["id"]

        client.put(f"/cart/items/{item_id}", json={"quantity": 5}, headers=GUEST)
        assert client.get("/cart/count", headers=GUEST).json() == {"count": 5}

        client.delete(f"/cart/items/{item_id}", headers=GUEST)
        assert client.get("/cart/count", headers=GUEST).json() == {"count": 0}

    def test_inactive_product_is_rejected(self, client, make_product):
        product_id = make_product(status="archived")
        response = client.post("/cart/items", json={"product_id": product_id}, headers=GUEST)
        assert response.status_code == 400

    def test_quantity_limit(self, client, make_product):
        product_id = make_product()
        response = client.post("/cart/items", json={"product_id": product_id, "quantity": 100}, headers=GUEST)
        assert response.status_code == 422
