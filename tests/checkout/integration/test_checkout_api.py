"""Integration tests for checkout endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers

from storefront.cart.api import cart_router
from storefront.checkout.api import checkout_router
from storefront.discounts.management import CreateDiscountCode
from storefront.payments.gateway import get_gateway

GUEST = {"X-Session-Id": "guest-1"}

SHIPPING = {
    "shipping_name": "Anna Svensson",
    "shipping_address": "Storgatan 1",
    "shipping_city": "Stockholm",
    "shipping_postal_code": "111 22",
    "shipping_country": "SE",
}


def _start_stripe_payment(client):
    response = client.post(
        "/checkout/stripe/payment-intent",
        json={"email": "anna@example.com", "shipping_country": "SE"},
        headers=GUEST,
    )
    return response.json()["payment_intent_id"]


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    app.include_router(checkout_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def filled_cart(client, make_product):
    product_id = make_product(price=200.0)
    client.post("/cart/items", json={"product_id": product_id, "quantity": 2}, headers=GUEST)
    return product_id


class TestTaxAndDiscounts:
    def test_tax_uses_default_rate(self, client):
        data = client.post("/checkout/tax", json={"subtotal": 1250}).json()
        assert data == {"tax": 250.0, "tax_rate": 0.25}

    def test_validate_discount(self, client):
        current_domain.process(
            CreateDiscountCode(code="SPRING", discount_type="fixed", discount_value=75), asynchronous=False
        )
        data = client.post("/checkout/validate-discount", json={"code": "spring", "subtotal": 400}).json()
        assert data["valid"] is True
        assert data["discount_amount"] == 75.0

    def test_unknown_discount(self, client):
        response = client.post("/checkout/validate-discount", json={"code": "NOPE", "subtotal": 400})
        assert response.status_code == 400
        assert response.json()["detail"] == "Discount code not found"


class TestTotals:
    def test_totals_with_country_detection(self, client, filled_cart, make_region):
        make_region()
        data = client.post("/checkout/totals", json={"shipping_country": "SE"}, headers=GUEST).json()
        assert data["subtotal"] == 400.0
        assert data["shipping_cost"] == 49.0
        assert data["total"] == 449.0
        assert data["currency"] == "SEK"

    def test_totals_for_empty_cart(self, client):
        response = client.post("/checkout/totals", json={}, headers=GUEST)
        assert response.status_code == 400

    def test_totals_require_session(self, client):
        assert client.post("/checkout/totals", json={}).status_code == 400


class TestPaymentAndOrder:
    def test_stripe_payment_intent(self, client, filled_cart):
        response = client.post("/checkout/stripe/payment-intent", json={"email": "anna@example.com"}, headers=GUEST)
        assert response.status_code == 200
        data = response.json()
        assert data["client_secret"].endswith("_secret")
        assert data["total"] == 400.0

    def test_paypal_create_and_capture(self, client, filled_cart):
        created = client.post("/checkout/paypal/create-order", json={}, headers=GUEST).json()
        captured = client.post(
            "/checkout/paypal/capture-order", json={"paypal_order_id": created["paypal_order_id"]}
        ).json()
        assert captured["status"] == "COMPLETED"

    def test_create_order(self, client, filled_cart):
        payment_id = _start_stripe_payment(client)
        response = client.post(
            "/checkout/create-order",
            json={**SHIPPING, "email": "anna@example.com", "payment_method": "stripe", "payment_id": payment_id},
            headers=GUEST,
        )
        assert response.status_code == 201
        assert response.json()["status"] == "paid"
        assert client.get("/cart/count", headers=GUEST).json() == {"count": 0}

    def test_create_order_uses_account_email(self, client, make_user, make_product):
        _, token = make_user()
        auth = {"Authorization": f"Bearer {token}"}
        client.post("/cart/items", json={"product_id": make_product()}, headers=auth)
        paypal_order_id = client.post("/checkout/paypal/create-order", json={}, headers=auth).json()["paypal_order_id"]

        response = client.post(
            "/checkout/create-order",
            json={**SHIPPING, "payment_method": "paypal", "payment_id": paypal_order_id},
            headers=auth,
        )
        assert response.status_code == 201

    def test_unpaid_order_rejected(self, client, filled_cart):
        payment_id = _start_stripe_payment(client)
        get_gateway("stripe").configure(status="canceled")
        response = client.post(
            "/checkout/create-order",
            json={**SHIPPING, "email": "anna@example.com", "payment_method": "stripe", "payment_id": payment_id},
            headers=GUEST,
        )
        assert response.status_code == 400

    def test_unknown_payment_method(self, client, filled_cart):
        response = client.post(
            "/checkout/create-order",
            json={**SHIPPING, "email": "anna@example.com", "payment_method": "cash", "payment_id": "x"},
            headers=GUEST,
        )
        assert response.status_code == 422

    def test_mistyped_payment_id_is_a_bad_request(self, client, filled_cart):
        response = client.post(
            "/checkout/create-order",
            json={**SHIPPING, "email": "anna@example.com", "payment_method": "stripe", "payment_id": "pi_typo"},
            headers=GUEST,
        )
        assert response.status_code == 400
        assert "Payment not completed. Status: unknown" in str(response.json())
