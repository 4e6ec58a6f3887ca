"""Integration tests for auth, account and admin user endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean import current_domain
from protean.integrations.fastapi import register_exception_handlers

from storefront.cart.api import cart_router
from storefront.cart.cart import ShoppingCart
from storefront.identity.api import account_router, admin_user_router, auth_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(auth_router)
    app.include_router(account_router)
    app.include_router(admin_user_router)
    app.include_router(cart_router)
    register_exception_handlers(app)
    return TestClient(app)


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


class TestRegisterAndLogin:
    def test_register(self, client, fake_email):
        response = client.post(
            "/auth/register",
            json={"email": "nils@example.com", "password": "correct-horse", "name": "Nils"},
        )
        assert response.status_code == 201
        assert "id" in response.json()
        assert len(fake_email.sent_to("nils@example.com")) == 1

    def test_register_short_password(self, client):
        response = client.post("/auth/register", json={"email": "nils@example.com", "password": "short"})
        assert response.status_code == 400

    def test_login_returns_token_and_cookie(self, client, make_user):
        make_user()
        response = client.post("/auth/login", json={"email": "anna@example.com", "password": "correct-horse"})
        assert response.status_code == 200
        data = response.json()
        assert data["token"]
        assert data["user"]["email"] == "anna@example.com"
        assert data["requires_verification"] is True
        assert "session" in response.cookies

    def test_login_with_wrong_password(self, client, make_user):
        make_user()
        response = client.post("/auth/login", json={"email": "anna@example.com", "password": "wrong-horse"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_login_merges_guest_cart(self, client, make_user, make_product):
        make_user()
        product_id = make_product()
        client.post("/cart/items", json={"product_id": product_id, "quantity": 2}, headers={"X-Session-Id": "guest-1"})

        response = client.post(
            "/auth/login",
            json={"email": "anna@example.com", "password": "correct-horse"},
            headers={"X-Session-Id": "guest-1"},
        )
        assert response.status_code == 200

        token = response.json()["token"]
        count = client.get("/cart/count", headers=_auth(token)).json()
        assert count == {"count": 2}
        assert current_domain.repository_for(ShoppingCart).find_for_session("guest-1") is None


class TestCurrentUser:
    def test_me_requires_authentication(self, client):
        response = client.get("/auth/me")
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_me_with_bearer_token(self, client, make_user):
        _, token = make_user()
        response = client.get("/auth/me", headers=_auth(token))
        assert response.status_code == 200
        assert response.json()["name"] == "Anna"

    def test_me_with_garbage_token(self, client):
        assert client.get("/auth/me", headers=_auth("not-a-token")).status_code == 401

    def test_forgot_password_for_unknown_email(self, client):
        response = client.post("/auth/forgot-password", json={"email": "nobody@example.com"})
        assert response.status_code == 200


class TestAccountAddresses:
    def test_add_and_list(self, client, make_user):
        _, token = make_user()
        response = client.post(
            "/account/addresses",
            json={
                "name": "Anna Svensson",
                "address_line1": "Storgatan 1",
                "city": "Stockholm",
                "postal_code": "111 22",
                "country": "SE",
            },
            headers=_auth(token),
        )
        assert response.status_code == 201

        addresses = client.get("/account/addresses", headers=_auth(token)).json()
        assert len(addresses) == 1
        assert addresses[0]["is_default"] is True

    def test_unknown_address_is_not_found(self, client, make_user):
        _, token = make_user()
        assert client.put("/account/addresses/missing/default", headers=_auth(token)).status_code == 404
        assert client.delete("/account/addresses/missing", headers=_auth(token)).status_code == 404

    def test_update_profile(self, client, make_user):
        _, token = make_user()
        response = client.put("/account/profile", json={"phone": "+46701234567"}, headers=_auth(token))
        assert response.json()["phone"] == "+46701234567"


class TestAdminUsers:
    def test_non_admin_is_forbidden(self, client, make_user):
        _, token = make_user()
        response = client.get("/admin/users", headers=_auth(token))
        assert response.status_code == 403
        assert response.json()["detail"] == "Unauthorized"

    def test_admin_lists_users(self, client, make_user):
        make_user()
        _, token = make_user(email="boss@example.com", is_admin=True)
        users = client.get("/admin/users", headers=_auth(token)).json()
        assert {u["email"] for u in users} == {"anna@example.com", "boss@example.com"}

    def test_admin_cannot_delete_self(self, client, make_user):
        admin_id, token = make_user(email="boss@example.com", is_admin=True)
        assert client.delete(f"/admin/users/{admin_id}", headers=_auth(token)).status_code == 400
