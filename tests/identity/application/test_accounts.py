"""Application tests for registration, login, verification, recovery and addresses."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.identity.user.addresses import AddAddress, RemoveAddress
from storefront.identity.user.authentication import AuthenticateUser, InvalidCredentialsError
from storefront.identity.user.profile import DeleteUser, SetAdminRole
from storefront.identity.user.recovery import ChangePassword, RequestPasswordReset, ResetPassword
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User
from storefront.identity.user.verification import ResendVerification, VerifyEmail


def _register(email="anna@example.com", password="correct-horse", name="Anna"):
    return current_domain.process(RegisterUser(email=email, password=password, name=name), asynchronous=False)


def _user(user_id):
    return current_domain.repository_for(User).get(user_id)


class TestRegistration:
    def test_email_is_normalized_and_password_hashed(self):
        user = _user(_register(email="Anna@Example.com"))
        assert user.email == "anna@example.com"
        assert user.password_hash.startswith("$2")

    def test_short_password_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _register(password="short")
        assert "at least 8 characters" in str(exc.value)

    def test_duplicate_email_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(email="ANNA@example.com")
        assert "already exists" in str(exc.value)

    def test_verification_email_sent(self, fake_email):
        _register()
        sent = fake_email.sent_to("anna@example.com")
        assert len(sent) == 1
        assert sent[0]["subject"] == "Verify your email address"


class TestLogin:
    def test_valid_credentials(self):
        user_id = _register()
        result = current_domain.process(
            AuthenticateUser(email="anna@example.com", password="correct-horse"), asynchronous=False
        )
        assert result == user_id
        assert _user(user_id).last_login_at is not None

    def test_wrong_password(self):
        _register()
        with pytest.raises(InvalidCredentialsError):
            current_domain.process(
                AuthenticateUser(email="anna@example.com", password="wrong-horse"), asynchronous=False
            )

    def test_unknown_email(self):
        with pytest.raises(InvalidCredentialsError):
            current_domain.process(
                AuthenticateUser(email="nobody@example.com", password="whatever1"), asynchronous=False
            )


class TestVerification:
    def test_verify_sends_welcome_email(self, fake_email):
        user_id = _register()
        token = _user(user_id).verification_token
        current_domain.process(VerifyEmail(token=token), asynchronous=False)

        assert _user(user_id).email_verified is True
        subjects = [e["subject"] for e in fake_email.sent_to("anna@example.com")]
        assert subjects[-1].startswith("Welcome to")

    def test_unknown_token_rejected(self):
        with pytest.raises(ValidationError):
            current_domain.process(VerifyEmail(token="nope"), asynchronous=False)

    def test_resend_issues_new_token(self, fake_email):
        user_id = _register()
        old_token = _user(user_id).verification_token
        current_domain.process(ResendVerification(email="anna@example.com"), asynchronous=False)
        assert _user(user_id).verification_token != old_token
        assert len(fake_email.sent_to("anna@example.com")) == 2


class TestPasswordRecovery:
    def test_reset_flow(self, fake_email):
        user_id = _register()
        current_domain.process(RequestPasswordReset(email="anna@example.com"), asynchronous=False)
        assert fake_email.sent_to("anna@example.com")[-1]["subject"] == "Reset your password"

        token = _user(user_id).password_reset_token
        current_domain.process(ResetPassword(token=token, new_password="battery-staple"), asynchronous=False)

        result = current_domain.process(
            AuthenticateUser(email="anna@example.com", password="battery-staple"), asynchronous=False
        )
        assert result == user_id

    def test_unknown_email_is_silently_ignored(self, fake_email):
        current_domain.process(RequestPasswordReset(email="nobody@example.com"), asynchronous=False)
        assert fake_email.sent_emails == []

    def test_change_password_requires_current(self):
        user_id = _register()
        with pytest.raises(ValidationError) as exc:
            current_domain.process(
                ChangePassword(user_id=user_id, current_password="wrong-horse", new_password="battery-staple"),
                asynchronous=False,
            )
        assert "Current password is incorrect" in str(exc.value)


class TestAdminUserManagement:
    def test_cannot_remove_own_admin_role(self):
        user_id = _register()
        with pytest.raises(ValidationError):
            current_domain.process(
                SetAdminRole(user_id=user_id, is_admin=False, acting_user_id=user_id), asynchronous=False
            )

    def test_cannot_delete_self(self):
        user_id = _register()
        with pytest.raises(ValidationError):
            current_domain.process(DeleteUser(user_id=user_id, acting_user_id=user_id), asynchronous=False)

    def test_grant_admin(self):
        user_id = _register()
        admin_id = _register(email="boss@example.com")
        current_domain.process(SetAdminRole(user_id=user_id, is_admin=True, acting_user_id=admin_id), asynchronous=False)
        assert _user(user_id).is_admin is True


class TestAddresses:
    def test_add_and_remove(self):
        user_id = _register()
        address_id = current_domain.process(
            AddAddress(
                user_id=user_id,
                name="Anna Svensson",
                address_line1="Storgatan 1",
                city="Stockholm",
                postal_code="111 22",
                country="SE",
            ),
            asynchronous=False,
        )
        assert _user(user_id).addresses[0].is_default is True

        current_domain.process(RemoveAddress(user_id=user_id, address_id=address_id), asynchronous=False)
        assert _user(user_id).addresses == []
