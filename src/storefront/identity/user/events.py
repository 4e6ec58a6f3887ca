"""Domain events for the User aggregate."""

from protean.fields import Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A shopper created an account; the email address still needs verification."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String()
    verification_token: String(required=True)


@storefront.event(part_of="User")
class VerificationRequested:
    """A fresh verification link was requested for an unverified account."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String()
    verification_token: String(required=True)


@storefront.event(part_of="User")
class EmailVerified:
    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String()


@storefront.event(part_of="User")
class PasswordResetRequested:
    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String()
    reset_token: String(required=True)
