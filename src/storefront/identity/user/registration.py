"""Account registration: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.auth.passwords import MIN_PASSWORD_LENGTH, hash_password
from storefront.identity.auth.tokens import generate_secret_token
from storefront.identity.shared.email import validate_email
from storefront.identity.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)
    name: String(max_length=200)
    phone: String(max_length=30)


def check_password_strength(password, field="password"):
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError({field: [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        email = validate_email(command.email)
        check_password_strength(command.password)

        repo = current_domain.repository_for(User)
        if repo.find_by_email(email) is not None:
            raise ValidationError({"email": ["An account with this email already exists"]})

        user = User.register(
            email=email,
            password_hash=hash_password(command.password),
            verification_token=generate_secret_token(),
            name=command.name,
            phone=command.phone,
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id))
        return str(user.id)
