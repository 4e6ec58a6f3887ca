"""Integration tests for the admin discount code endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.discounts.api import admin_discount_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(admin_discount_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def admin_headers(make_user):
    _, token = make_user(email="admin@example.com", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


class TestAdminDiscountAPI:
    def test_anonymous_rejected(self, client):
        assert client.get("/admin/discounts").status_code == 401

    def test_create_and_fetch(self, client, admin_headers):
        response = client.post(
            "/admin/discounts",
            json={"code": "summer20", "discount_type": "percentage", "discount_value": 20},
            headers=admin_headers,
        )
        assert response.status_code == 201
        discount_id = response.json()["id"]

        response = client.get(f"/admin/discounts/{discount_id}", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["code"] == "SUMMER20"

    def test_percentage_over_hundred_returns_400(self, client, admin_headers):
        response = client.post(
            "/admin/discounts",
            json={"code": "TOOMUCH", "discount_type": "percentage", "discount_value": 150},
            headers=admin_headers,
        )
        assert response.status_code == 400

    def test_update_and_delete(self, client, admin_headers):
        discount_id = client.post(
            "/admin/discounts",
            json={"code": "FIXED50", "discount_type": "fixed", "discount_value": 50},
            headers=admin_headers,
        ).json()["id"]

        response = client.put(f"/admin/discounts/{discount_id}", json={"active": False}, headers=admin_headers)
        assert response.status_code == 200
        assert client.get(f"/admin/discounts/{discount_id}", headers=admin_headers).json()["active"] is False

        assert client.delete(f"/admin/discounts/{discount_id}", headers=admin_headers).status_code == 200
        assert client.get("/admin/discounts", headers=admin_headers).json() == []

    def test_missing_code_returns_404(self, client, admin_headers):
        assert client.get("/admin/discounts/does-not-exist", headers=admin_headers).status_code == 404
