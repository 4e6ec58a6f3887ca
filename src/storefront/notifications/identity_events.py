"""Account emails: reacts to User events."""

from protean import handle

from storefront.domain import storefront
from storefront.identity.user.events import EmailVerified, PasswordResetRequested, UserRegistered, VerificationRequested
from storefront.identity.user.user import User
from storefront.notifications.dispatch import send_email


@storefront.event_handler(part_of=User)
class AccountEmailsHandler:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        send_email("verification", event.email, {"name": event.name, "token": event.verification_token})

    @handle(VerificationRequested)
    def on_verification_requested(self, event: VerificationRequested) -> None:
        send_email("verification", event.email, {"name": event.name, "token": event.verification_token})

    @handle(EmailVerified)
    def on_email_verified(self, event: EmailVerified) -> None:
        send_email("welcome", event.email, {"name": event.name})

    @handle(PasswordResetRequested)
    def on_password_reset_requested(self, event: PasswordResetRequested) -> None:
        send_email("password_reset", event.email, {"name": event.name, "token": event.reset_token})
