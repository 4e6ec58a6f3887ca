"""Application tests for the payment gateway registry and provider lookups."""

from types import SimpleNamespace

import pytest
import requests
import stripe
from protean import current_domain
from protean.exceptions import ConfigurationError, ValidationError

from storefront.cart.management import AddToCart
from storefront.checkout.placement import PlaceOrder
from storefront.orders.order import Order
from storefront.payments.gateway import get_gateway, set_gateway
from storefront.payments.gateway.fake_adapter import FakeGateway
from storefront.payments.gateway.paypal_adapter import PayPalGateway
from storefront.payments.gateway.stripe_adapter import StripeGateway


class _Response:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


def _raise(exc):
    def _raiser(*args, **kwargs):
        raise exc

    return _raiser


class TestRegistry:
    def test_fake_gateway_outside_production(self):
        assert isinstance(get_gateway("stripe"), FakeGateway)
        assert isinstance(get_gateway("paypal"), FakeGateway)

    def test_real_adapter_when_configured(self, monkeypatch):
        monkeypatch.setenv("STRIPE_SECRET_KEY", "sk_test_123")
        assert isinstance(get_gateway("stripe"), StripeGateway)

    def test_production_refuses_missing_stripe(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        with pytest.raises(ConfigurationError) as exc:
            get_gateway("stripe")
        assert "Stripe is not configured" in str(exc.value)

    def test_production_refuses_missing_paypal(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        with pytest.raises(ConfigurationError) as exc:
            get_gateway("paypal")
        assert "PayPal is not configured" in str(exc.value)

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            get_gateway("cash")


class TestStripeLookup:
    def test_reports_amount_in_major_units(self, monkeypatch):
        intent = SimpleNamespace(status="succeeded", amount=54900, currency="sek")
        monkeypatch.setattr(stripe.PaymentIntent, "retrieve", lambda *args, **kwargs: intent)

        payment = StripeGateway("sk_test_123", "whsec_123").retrieve_payment("pi_1")

        assert payment.status == "succeeded"
        assert payment.amount == 549.0
        assert payment.currency == "SEK"

    def test_provider_error_becomes_unknown_status(self, monkeypatch):
        monkeypatch.setattr(
            stripe.PaymentIntent,
            "retrieve",
            _raise(stripe.InvalidRequestError("No such payment_intent: 'pi_typo'", "intent")),
        )

        payment = StripeGateway("sk_test_123", "whsec_123").retrieve_payment("pi_typo")

        assert payment.status == "unknown"
        assert payment.amount is None


class TestPayPalLookup:
    def test_reads_purchase_unit_amount(self, monkeypatch):
        monkeypatch.setattr(requests, "post", lambda *args, **kwargs: _Response({"access_token": "token"}))
        monkeypatch.setattr(
            requests,
            "get",
            lambda *args, **kwargs: _Response(
                {
                    "id": "PAYPAL-1",
                    "status": "COMPLETED",
                    "purchase_units": [{"amount": {"currency_code": "SEK", "value": "549.00"}}],
                }
            ),
        )

        payment = PayPalGateway("client", "secret").retrieve_payment("PAYPAL-1")

        assert payment.status == "COMPLETED"
        assert payment.amount == 549.0
        assert payment.currency == "SEK"

    def test_unknown_order_becomes_unknown_status(self, monkeypatch):
        monkeypatch.setattr(requests, "post", lambda *args, **kwargs: _Response({"access_token": "token"}))
        monkeypatch.setattr(requests, "get", lambda *args, **kwargs: _Response({"name": "RESOURCE_NOT_FOUND"}, 404))

        assert PayPalGateway("client", "secret").retrieve_payment("NOPE").status == "unknown"

    def test_unreachable_provider_becomes_unknown_status(self, monkeypatch):
        monkeypatch.setattr(requests, "post", _raise(requests.ConnectionError("connection refused")))

        assert PayPalGateway("client", "secret").retrieve_payment("PAYPAL-1").status == "unknown"


class TestOrderPlacementWithFailingLookup:
    def test_order_rejected_when_provider_errors(self, make_product, monkeypatch):
        product_id = make_product()
        current_domain.process(AddToCart(session_id="guest-1", product_id=product_id), asynchronous=False)

        set_gateway("stripe", StripeGateway("sk_test_123", "whsec_123"))
        monkeypatch.setattr(
            stripe.PaymentIntent,
            "retrieve",
            _raise(stripe.APIConnectionError("Network error")),
        )

        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                PlaceOrder(
                    session_id="guest-1",
                    email="anna@example.com",
                    shipping_name="Anna Svensson",
                    shipping_address="Storgatan 1",
                    shipping_city="Stockholm",
                    shipping_postal_code="111 22",
                    shipping_country="SE",
                    payment_method="stripe",
                    payment_id="pi_unreachable",
                ),
                asynchronous=False,
            )

        assert "Payment not completed. Status: unknown" in str(exc.value)
        assert current_domain.repository_for(Order).find_by_payment_intent("pi_unreachable") is None
