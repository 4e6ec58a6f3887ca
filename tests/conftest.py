import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before the domain is imported anywhere."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront
    from storefront.web import create_app  # noqa: F401  registers every router's commands

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _adapters(monkeypatch):
    """Fresh fake gateways and email channel for every test, never the real providers."""
    from storefront.notifications.channel import reset_channels
    from storefront.payments.gateway import reset_gateways

    for var in (
        "STRIPE_SECRET_KEY",
        "PAYPAL_CLIENT_ID",
        "PAYPAL_CLIENT_SECRET",
        "RESEND_API_KEY",
        "ADMIN_EMAIL",
    ):
        monkeypatch.delenv(var, raising=False)

    reset_gateways()
    reset_channels()
    yield
    reset_gateways()
    reset_channels()


# ---------------------------------------------------------------------------
# Factories shared across areas
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    from protean import current_domain

    from storefront.catalogue.product.creation import CreateProduct

    def _make(**overrides):
        defaults = {
            "name_en": "Stoneware Bowl",
            "name_sv": "Stengodsskål",
            "price": 250.0,
            "status": "active",
            "stock_quantity": 20,
        }
        defaults.update(overrides)
        return current_domain.process(CreateProduct(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def make_region():
    from protean import current_domain

    from storefront.shipping.management import CreateShippingRegion

    def _make(**overrides):
        defaults = {
            "name_en": "Sweden",
            "name_sv": "Sverige",
            "code": "SE",
            "base_price": 49.0,
            "free_shipping_threshold": 500.0,
            "countries": ["SE"],
        }
        defaults.update(overrides)
        return current_domain.process(CreateShippingRegion(**defaults), asynchronous=False)

    return _make


@pytest.fixture()
def make_user():
    """Register a user and return ``(user_id, session_token)``."""
    from protean import current_domain

    from storefront.identity.auth.tokens import issue_session_token
    from storefront.identity.user.registration import RegisterUser
    from storefront.identity.user.user import User

    def _make(email="anna@example.com", password="correct-horse", name="Anna", is_admin=False):
        user_id = current_domain.process(
            RegisterUser(email=email, password=password, name=name), asynchronous=False
        )
        if is_admin:
            repo = current_domain.repository_for(User)
            user = repo.get(user_id)
            user.set_admin(True)
            repo.add(user)
        return user_id, issue_session_token(user_id, email, is_admin)

    return _make


@pytest.fixture()
def fake_email():
    from storefront.notifications.channel import get_email_channel

    return get_email_channel()


@pytest.fixture()
def make_order():
    """Persist an order directly and return it."""
    from protean import current_domain

    from storefront.orders.order import Order
    from storefront.shared.text import generate_order_number

    def _make(email="anna@example.com", user_id=None, payment_status="paid", payment_intent_id="pi_1"):
        order = Order.place(
            order_number=generate_order_number(),
            email=email,
            payment_method="stripe",
            lines=[
                {
                    "product_id": "prod-1",
                    "product_name": "Stoneware Bowl",
                    "unit_price": 250.0,
                    "quantity": 1,
                }
            ],
            totals={"subtotal": 250.0, "discount_amount": 0.0, "shipping_cost": 49.0, "tax": 50.0, "total": 299.0},
            shipping={
                "shipping_name": "Anna Svensson",
                "shipping_address": "Storgatan 1",
                "shipping_city": "Stockholm",
                "shipping_postal_code": "111 22",
                "shipping_country": "SE",
            },
            payment_status=payment_status,
            payment_intent_id=payment_intent_id,
            user_id=user_id,
        )
        current_domain.repository_for(Order).add(order)
        return order

    return _make
