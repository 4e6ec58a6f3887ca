"""Contact emails: reacts to Message events."""

from protean import handle

from storefront.domain import storefront
from storefront.notifications.dispatch import send_email
from storefront.support.events import MessageReceived, MessageReplied
from storefront.support.message import Message


@storefront.event_handler(part_of=Message)
class ContactEmailsHandler:
    @handle(MessageReceived)
    def on_message_received(self, event: MessageReceived) -> None:
        send_email("contact_confirmation", event.email, {"name": event.name, "subject": event.subject})

    @handle(MessageReplied)
    def on_message_replied(self, event: MessageReplied) -> None:
        send_email(
            "admin_reply",
            event.email,
            {
                "name": event.name,
                "subject": event.subject,
                "original_message": event.original_message,
                "reply_text": event.reply_text,
            },
        )
