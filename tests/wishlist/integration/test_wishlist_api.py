"""Integration tests for wishlist endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.wishlist.api import wishlist_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(wishlist_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def auth(make_user):
    _, token = make_user()
    return {"Authorization": f"Bearer {token}"}


class TestWishlistApi:
    def test_requires_login(self, client):
        assert client.get("/wishlist").status_code == 401

    def test_add_list_remove(self, client, auth, make_product):
        product_id = make_product()
        response = client.post("/wishlist", json={"product_id": product_id}, headers=auth)
        assert response.status_code == 201

        entries = client.get("/wishlist", headers=auth).json()
        assert len(entries) == 1
        assert entries[0]["product"]["slug"] == "stoneware-bowl"

        client.delete(f"/wishlist/{product_id}", headers=auth)
        assert client.get("/wishlist", headers=auth).json() == []

    def test_unknown_product(self, client, auth):
        assert client.post("/wishlist", json={"product_id": "missing"}, headers=auth).status_code == 400
