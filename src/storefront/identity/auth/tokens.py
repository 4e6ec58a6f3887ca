"""Signed session tokens (HS256 JWT)."""

import secrets
from datetime import UTC, datetime, timedelta

import jwt
import structlog

from storefront.utils.config import get_session_secret, get_session_ttl_days

logger = structlog.get_logger(__name__)

_ALGORITHM = "HS256"


def issue_session_token(user_id: str, email: str, is_admin: bool) -> str:
    expires_at = datetime.now(UTC) + timedelta(days=get_session_ttl_days())
    claims = {
        "sub": str(user_id),
        "email": email,
        "is_admin": bool(is_admin),
        "exp": expires_at,
    }
    return jwt.encode(claims, get_session_secret(), algorithm=_ALGORITHM)


def decode_session_token(token: str) -> dict | None:
    """Return the token claims, or None when the token is expired or tampered with."""
    try:
        return jwt.decode(token, get_session_secret(), algorithms=[_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        return None
    except jwt.InvalidTokenError:
        logger.warning("Rejected invalid session token")
        return None


def generate_secret_token() -> str:
    """Opaque one-time token for email verification and password reset links."""
    return secrets.token_urlsafe(32)
