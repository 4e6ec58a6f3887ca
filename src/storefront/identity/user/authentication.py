"""Login: command and handler.

A successful login returns the user id; the API layer turns it into a
session token. Wrong credentials raise ``InvalidCredentialsError`` so the API
can answer 401 without revealing which half of the pair was wrong.
"""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.auth.passwords import verify_password
from storefront.identity.user.user import User

logger = structlog.get_logger(__name__)


class InvalidCredentialsError(Exception):
    """Email/password pair does not match any account."""


@storefront.command(part_of="User")
class AuthenticateUser:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@storefront.command_handler(part_of=User)
class AuthenticateUserHandler:
    @handle(AuthenticateUser)
    def authenticate(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)

        if user is None or not verify_password(command.password, user.password_hash):
            logger.info("Login rejected", email_domain=command.email.rpartition("@")[2])
            raise InvalidCredentialsError("Invalid email or password")

        user.record_login()
        repo.add(user)
        return str(user.id)
