"""Environment-driven settings.

Every value is read on demand so tests can patch the environment with
``monkeypatch.setenv`` without reloading modules.
"""

import os

_DEV_SESSION_SECRET = "storefront-dev-secret-change-me"


def get_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def is_production() -> bool:
    return get_environment() == "production"


def get_session_secret() -> str:
    return os.getenv("SESSION_SECRET", _DEV_SESSION_SECRET)


def get_session_ttl_days() -> int:
    return int(os.getenv("SESSION_TTL_DAYS", "7"))


def get_site_url() -> str:
    return os.getenv("SITE_URL", "http://localhost:3000").rstrip("/")


def get_admin_email() -> str | None:
    return os.getenv("ADMIN_EMAIL") or None


def get_resend_api_key() -> str | None:
    return os.getenv("RESEND_API_KEY") or None


def get_email_senders() -> dict[str, str]:
    """Sender addresses per purpose, matching the mailboxes the shop owns."""
    return {
        "noreply": os.getenv("EMAIL_FROM_NOREPLY", "Storefront <noreply@storefront.local>"),
        "orders": os.getenv("EMAIL_FROM_ORDERS", "Storefront Orders <orders@storefront.local>"),
        "info": os.getenv("EMAIL_FROM_INFO", "Storefront <info@storefront.local>"),
    }


def get_stripe_credentials() -> tuple[str, str] | None:
    secret_key = os.getenv("STRIPE_SECRET_KEY")
    if not secret_key:
        return None
    return secret_key, os.getenv("STRIPE_WEBHOOK_SECRET", "")


def get_paypal_credentials() -> tuple[str, str, str] | None:
    client_id = os.getenv("PAYPAL_CLIENT_ID")
    client_secret = os.getenv("PAYPAL_CLIENT_SECRET")
    if not client_id or not client_secret:
        return None
    return client_id, client_secret, os.getenv("PAYPAL_MODE", "sandbox")
