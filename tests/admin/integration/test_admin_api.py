"""Integration tests for the back-office dashboard endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.admin.api import admin_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(admin_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def admin_headers(make_user):
    _, token = make_user(email="admin@example.com", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


class TestAdminDashboardApi:
    def test_requires_admin(self, client, make_user):
        assert client.get("/admin/stats").status_code == 401
        _, token = make_user()
        assert client.get("/admin/stats", headers={"Authorization": f"Bearer {token}"}).status_code == 403

    def test_stats(self, client, admin_headers, make_product):
        make_product()
        data = client.get("/admin/stats", headers=admin_headers).json()
        assert data["total_products"] == 1
        assert data["total_users"] == 1

    def test_low_stock_sorted_by_quantity(self, client, admin_headers, make_product):
        make_product(name_en="Five", name_sv="Fem", stock_quantity=5)
        make_product(name_en="Two", name_sv="Två", stock_quantity=2)

        data = client.get("/admin/low-stock", headers=admin_headers).json()
        assert data["threshold"] == 10
        assert [p["name_en"] for p in data["products"]] == ["Two", "Five"]

        data = client.get("/admin/low-stock", params={"threshold": 3}, headers=admin_headers).json()
        assert [p["name_en"] for p in data["products"]] == ["Two"]


class TestCustomerDirectoryApi:
    def test_list_customers(self, client, admin_headers, make_user, make_order):
        anna_id, _ = make_user()
        make_order(user_id=anna_id)
        make_order(email="guest@example.com", payment_intent_id="pi_2")

        data = client.get("/admin/customers", headers=admin_headers).json()
        by_email = {c["email"]: c for c in data}

        assert set(by_email) == {"anna@example.com", "guest@example.com"}
        assert by_email["anna@example.com"]["order_count"] == 1
        assert by_email["anna@example.com"]["total_spent"] == 299.0
        assert by_email["guest@example.com"]["is_registered"] is False

        data = client.get("/admin/customers", params={"search": "guest"}, headers=admin_headers).json()
        assert [c["email"] for c in data] == ["guest@example.com"]

    def test_customer_detail_lists_orders(self, client, admin_headers, make_user, make_order):
        anna_id, _ = make_user()
        order = make_order(user_id=anna_id)

        data = client.get(f"/admin/customers/{anna_id}", headers=admin_headers).json()

        assert data["email"] == "anna@example.com"
        assert [o["order_number"] for o in data["orders"]] == [order.order_number]
        assert data["orders"][0]["total"] == 299.0

    def test_unknown_customer(self, client, admin_headers):
        response = client.get("/admin/customers/nobody@example.com", headers=admin_headers)
        assert response.status_code == 404

    def test_requires_admin(self, client, make_user):
        _, token = make_user()
        response = client.get("/admin/customers", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403
