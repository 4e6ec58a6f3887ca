from protean.fields import Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Message")
class MessageReceived:
    __version__ = 1

    message_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    subject: String()


@storefront.event(part_of="Message")
class MessageReplied:
    """An admin answered a contact message."""

    __version__ = 1

    message_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    subject: String()
    original_message: Text(required=True)
    reply_text: Text(required=True)
