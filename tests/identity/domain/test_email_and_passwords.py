"""Tests for email validation, password hashing and session tokens."""

import pytest
from protean.exceptions import ValidationError

from storefront.identity.auth.passwords import hash_password, verify_password
from storefront.identity.auth.tokens import decode_session_token, issue_session_token
from storefront.identity.shared.email import validate_email


class TestValidateEmail:
    def test_normalizes(self):
        assert validate_email("  Anna@Example.COM ") == "anna@example.com"

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "anna",
            "anna@@example.com",
            "anna@example",
            ".anna@example.com",
            "anna@-example.com",
            "an..na@example.com",
            "anna smith@example.com",
            "anna<x>@example.com",
        ],
    )
    def test_rejects_malformed(self, address):
        with pytest.raises(ValidationError):
            validate_email(address)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("correct-horse")
        assert hashed != "correct-horse"
        assert verify_password("correct-horse", hashed)
        assert not verify_password("wrong-horse", hashed)


class TestSessionTokens:
    def test_round_trip_claims(self):
        claims = decode_session_token(issue_session_token("user-1", "anna@example.com", True))
        assert claims["sub"] == "user-1"
        assert claims["is_admin"] is True

    def test_tampered_token_rejected(self):
        token = issue_session_token("user-1", "anna@example.com", False)
        assert decode_session_token(token + "x") is None

    def test_token_signed_with_other_secret_rejected(self, monkeypatch):
        token = issue_session_token("user-1", "anna@example.com", False)
        monkeypatch.setenv("SESSION_SECRET", "another-secret")
        assert decode_session_token(token) is None
