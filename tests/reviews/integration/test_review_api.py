"""Integration tests for review endpoints."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.reviews.api import admin_review_router, review_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(review_router)
    app.include_router(admin_review_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def admin_headers(make_user):
    _, token = make_user(email="admin@example.com", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


REVIEW = {"rating": 5, "review_text": "Perfect for ramen."}


class TestPublicReviews:
    def test_guest_needs_name_and_email(self, client, make_product):
        make_product()
        response = client.post("/products/stoneware-bowl/reviews", json=REVIEW)
        assert response.status_code == 400
        assert response.json()["detail"] == "Name and email are required"

    def test_logged_in_user_defaults(self, client, make_product, make_user):
        make_product()
        _, token = make_user()
        response = client.post(
            "/products/stoneware-bowl/reviews", json=REVIEW, headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 201

    def test_unknown_product(self, client):
        response = client.get("/products/no-such-thing/reviews")
        assert response.status_code == 404

    def test_listing_shows_only_approved(self, client, make_product, admin_headers):
        make_product()
        review_id = client.post(
            "/products/stoneware-bowl/reviews", json={**REVIEW, "name": "Nils", "email": "nils@example.com"}
        ).json()["id"]
        client.post("/products/stoneware-bowl/reviews", json={**REVIEW, "name": "Eva", "email": "eva@example.com"})

        client.put(f"/admin/reviews/{review_id}", json={"status": "approved"}, headers=admin_headers)

        data = client.get("/products/stoneware-bowl/reviews").json()
        assert [r["name"] for r in data["reviews"]] == ["Nils"]
        assert data["stats"]["total"] == 1
        assert data["stats"]["distribution"]["5"] == 1

        helpful = client.post(f"/products/stoneware-bowl/reviews/{review_id}/helpful").json()
        assert helpful == {"helpful_count": 1}


class TestAdminReviews:
    def test_requires_admin(self, client):
        assert client.get("/admin/reviews").status_code == 401

    def test_filter_and_delete(self, client, make_product, admin_headers):
        make_product()
        review_id = client.post(
            "/products/stoneware-bowl/reviews", json={**REVIEW, "name": "Nils", "email": "nils@example.com"}
        ).json()["id"]

        pending = client.get("/admin/reviews", params={"status": "pending"}, headers=admin_headers).json()
        assert len(pending) == 1
        assert pending[0]["email"] == "nils@example.com"

        client.delete(f"/admin/reviews/{review_id}", headers=admin_headers)
        assert client.get("/admin/reviews", headers=admin_headers).json() == []
