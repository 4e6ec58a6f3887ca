"""Password recovery and change: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.auth.passwords import hash_password, verify_password
from storefront.identity.auth.tokens import generate_secret_token
from storefront.identity.user.registration import check_password_strength
from storefront.identity.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RequestPasswordReset:
    email: String(required=True, max_length=254)


@storefront.command(part_of="User")
class ResetPassword:
    token: String(required=True, max_length=100)
    new_password: String(required=True, max_length=128)


@storefront.command(part_of="User")
class ChangePassword:
    user_id: Identifier(required=True)
    current_password: String(required=True, max_length=128)
    new_password: String(required=True, max_length=128)


@storefront.command_handler(part_of=User)
class PasswordRecoveryHandler:
    @handle(RequestPasswordReset)
    def request_reset(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None:
            # Unknown addresses are ignored so the endpoint does not reveal which accounts exist
            logger.info("Password reset requested for unknown email")
            return

        user.request_password_reset(generate_secret_token())
        repo.add(user)

    @handle(ResetPassword)
    def reset_password(self, command):
        check_password_strength(command.new_password, field="new_password")

        repo = current_domain.repository_for(User)
        user = repo.find_by_reset_token(command.token)
        if user is None:
            raise ValidationError({"token": ["Invalid or expired reset token"]})

        user.reset_password(command.token, hash_password(command.new_password))
        repo.add(user)

    @handle(ChangePassword)
    def change_password(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        if not verify_password(command.current_password, user.password_hash):
            raise ValidationError({"current_password": ["Current password is incorrect"]})
        check_password_strength(command.new_password, field="new_password")

        user.change_password(hash_password(command.new_password))
        repo.add(user)
