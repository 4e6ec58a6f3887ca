"""Session resolution for API routes (FastAPI dependencies).

The session token travels either in an ``Authorization: Bearer`` header or in
the ``session`` cookie set at login. The admin flag is always re-read from the
stored user so revoking the role takes effect before the token expires.
"""

from fastapi import Cookie, Depends, Header, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.auth.tokens import decode_session_token
from storefront.identity.user.user import User

SESSION_COOKIE = "session"


def _extract_token(authorization: str | None, session_cookie: str | None) -> str | None:
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
    return session_cookie or None


async def optional_user(
    authorization: str | None = Header(default=None),
    session: str | None = Cookie(default=None),
) -> User | None:
    token = _extract_token(authorization, session)
    if not token:
        return None

    claims = decode_session_token(token)
    if claims is None:
        return None

    try:
        return current_domain.repository_for(User).get(claims["sub"])
    except ObjectNotFoundError:
        return None


async def require_user(user: User | None = Depends(optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


async def require_admin(user: User | None = Depends(optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Unauthorized")
    return user


async def guest_session_id(x_session_id: str | None = Header(default=None)) -> str | None:
    """Anonymous cart key sent by the storefront for shoppers who are not logged in."""
    return x_session_id or None
