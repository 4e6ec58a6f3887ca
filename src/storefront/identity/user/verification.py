"""Email verification: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.auth.tokens import generate_secret_token
from storefront.identity.user.user import User


@storefront.command(part_of="User")
class VerifyEmail:
    token: String(required=True, max_length=100)


@storefront.command(part_of="User")
class ResendVerification:
    email: String(required=True, max_length=254)


@storefront.command_handler(part_of=User)
class EmailVerificationHandler:
    @handle(VerifyEmail)
    def verify_email(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_verification_token(command.token)
        if user is None:
            raise ValidationError({"token": ["Invalid verification token"]})

        user.verify_email(command.token)
        repo.add(user)
        return str(user.id)

    @handle(ResendVerification)
    def resend_verification(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None:
            raise ValidationError({"email": ["No account found for this email"]})

        user.reissue_verification(generate_secret_token())
        repo.add(user)
