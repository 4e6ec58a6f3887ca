"""Integration tests for store settings."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.checkout.api import checkout_router
from storefront.settings.api import settings_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(settings_router)
    app.include_router(checkout_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def admin_headers(make_user):
    _, token = make_user(email="admin@example.com", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


class TestStoreSettingsApi:
    def test_requires_admin(self, client):
        assert client.get("/admin/settings").status_code == 401

    def test_defaults_created_on_first_read(self, client, admin_headers):
        data = client.get("/admin/settings", headers=admin_headers).json()
        assert data["currency"] == "SEK"
        assert data["tax_rate"] == 25.0
        assert data["low_stock_threshold"] == 10

    def test_update_changes_checkout_tax(self, client, admin_headers):
        response = client.put(
            "/admin/settings", json={"tax_rate": 12, "currency": "nok", "store_name": "Lerverket"}, headers=admin_headers
        )
        data = response.json()
        assert data["currency"] == "NOK"
        assert data["store_name"] == "Lerverket"

        tax = client.post("/checkout/tax", json={"subtotal": 112}).json()
        assert tax == {"tax": 12.0, "tax_rate": 0.12}

    def test_rejects_out_of_range_rate(self, client, admin_headers):
        assert client.put("/admin/settings", json={"tax_rate": 120}, headers=admin_headers).status_code == 422
