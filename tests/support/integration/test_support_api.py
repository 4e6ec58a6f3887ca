"""Integration tests for the contact form and admin inbox."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers

from storefront.support.api import admin_message_router, contact_router


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(contact_router)
    app.include_router(admin_message_router)
    register_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def admin_headers(make_user):
    _, token = make_user(email="admin@example.com", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


CONTACT = {"name": "Anna", "email": "anna@example.com", "subject": "Custom order", "message": "Larger bowls?"}


class TestSupportApi:
    def test_contact_form(self, client):
        response = client.post("/contact", json=CONTACT)
        assert response.status_code == 201

    def test_contact_form_validation(self, client):
        assert client.post("/contact", json={**CONTACT, "message": ""}).status_code == 422

    def test_inbox_requires_admin(self, client, make_user):
        _, token = make_user()
        assert client.get("/admin/messages", headers={"Authorization": f"Bearer {token}"}).status_code == 403

    def test_open_reply_archive(self, client, admin_headers):
        message_id = client.post("/contact", json=CONTACT).json()["id"]

        unread = client.get("/admin/messages", params={"status": "unread"}, headers=admin_headers).json()
        assert [m["id"] for m in unread] == [message_id]

        opened = client.get(f"/admin/messages/{message_id}", headers=admin_headers).json()
        assert opened["status"] == "read"

        response = client.post(
            f"/admin/messages/{message_id}/reply", json={"reply_text": "Yes!"}, headers=admin_headers
        )
        assert response.status_code == 201

        client.put(f"/admin/messages/{message_id}/archive", headers=admin_headers)
        message = client.get(f"/admin/messages/{message_id}", headers=admin_headers).json()
        assert message["status"] == "archived"
        assert message["replies"][0]["reply_text"] == "Yes!"

    def test_unknown_status_filter(self, client, admin_headers):
        assert client.get("/admin/messages", params={"status": "spam"}, headers=admin_headers).status_code == 422
