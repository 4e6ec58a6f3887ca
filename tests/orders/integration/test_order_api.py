"""Integration tests for order history, admin order management and the Stripe webhook."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers

from storefront.orders.api import admin_order_router, order_router
from storefront.orders.order import Order
from storefront.payments.api import payment_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(order_router)
    app.include_router(admin_order_router)
    app.include_router(payment_router)
    register_exception_handlers(app)
    return TestClient(app)


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


class TestShopperOrders:
    def test_requires_login(self, client):
        assert client.get("/orders").status_code == 401

    def test_lists_own_orders(self, client, make_user, make_order):
        user_id, token = make_user()
        make_order(user_id=user_id)
        make_order(email="other@example.com", user_id="someone-else")

        orders = client.get("/orders", headers=_auth(token)).json()
        assert len(orders) == 1

    def test_order_detail(self, client, make_user, make_order):
        user_id, token = make_user()
        order = make_order(user_id=user_id)

        data = client.get(f"/orders/{order.order_number}", headers=_auth(token)).json()
        assert data["order_number"] == order.order_number
        assert data["items"][0]["product_name"] == "Stoneware Bowl"
        assert data["history"][0]["to_status"] == "paid"

    def test_other_shoppers_order_is_not_found(self, client, make_user, make_order):
        _, token = make_user()
        order = make_order(user_id="someone-else")
        response = client.get(f"/orders/{order.order_number}", headers=_auth(token))
        assert response.status_code == 404
        assert response.json()["detail"] == "Order not found"


class TestAdminOrders:
    def test_non_admin_forbidden(self, client, make_user):
        _, token = make_user()
        assert client.get("/admin/orders", headers=_auth(token)).status_code == 403

    def test_filter_by_status(self, client, make_user, make_order):
        _, token = make_user(email="admin@example.com", is_admin=True)
        make_order()
        make_order(payment_status="pending", payment_intent_id="pi_2")

        orders = client.get("/admin/orders", params={"status": "pending"}, headers=_auth(token)).json()
        assert len(orders) == 1
        assert orders[0]["status"] == "pending"

    def test_update_status_and_tracking(self, client, make_user, make_order):
        admin_id, token = make_user(email="admin@example.com", is_admin=True)
        order = make_order()

        response = client.put(
            f"/admin/orders/{order.id}/status", json={"status": "processing"}, headers=_auth(token)
        )
        assert response.status_code == 200

        response = client.put(
            f"/admin/orders/{order.id}/tracking", json={"tracking_number": "SE123"}, headers=_auth(token)
        )
        assert response.status_code == 200

        data = client.get(f"/admin/orders/{order.id}", headers=_auth(token)).json()
        assert data["status"] == "shipped"
        assert data["tracking_number"] == "SE123"
        assert data["history"][-1]["changed_by"] == admin_id

    def test_invalid_transition_is_bad_request(self, client, make_user, make_order):
        _, token = make_user(email="admin@example.com", is_admin=True)
        order = make_order()
        response = client.put(f"/admin/orders/{order.id}/status", json={"status": "pending"}, headers=_auth(token))
        assert response.status_code == 400

    def test_missing_order(self, client, make_user):
        _, token = make_user(email="admin@example.com", is_admin=True)
        assert client.get("/admin/orders/missing", headers=_auth(token)).status_code == 404


class TestStripeWebhook:
    def _post(self, client, event, signature="test-signature"):
        return client.post(
            "/payments/stripe/webhook",
            content=json.dumps(event),
            headers={"Stripe-Signature": signature, "Content-Type": "application/json"},
        )

    def test_bad_signature(self, client):
        response = self._post(client, {"type": "payment_intent.succeeded"}, signature="forged")
        assert response.status_code == 401

    def test_succeeded_marks_order_paid(self, client, make_order):
        order = make_order(payment_status="pending", payment_intent_id="pi_hook")
        event = {"type": "payment_intent.succeeded", "data": {"object": {"id": "pi_hook"}}}

        response = self._post(client, event)
        assert response.json() == {"received": True}
        assert current_domain.repository_for(Order).get(order.id).status == "paid"

    def test_failed_payment(self, client, make_order):
        order = make_order(payment_status="pending", payment_intent_id="pi_hook")
        event = {"type": "payment_intent.payment_failed", "data": {"object": {"id": "pi_hook"}}}
        self._post(client, event)
        assert current_domain.repository_for(Order).get(order.id).payment_status == "failed"

    def test_unrelated_event_is_acknowledged(self, client):
        response = self._post(client, {"type": "charge.refunded", "data": {"object": {"id": "ch_1"}}})
        assert response.status_code == 200

    def test_missing_payment_intent(self, client):
        response = self._post(client, {"type": "payment_intent.succeeded", "data": {"object": {}}})
        assert response.status_code == 400
