"""Contact-form message aggregate with the Reply entity.

Status lifecycle: ``unread`` on arrival, ``read`` once opened by an admin,
``replied`` after an admin answers, ``archived`` when filed away.
"""

from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, HasMany, Identifier, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now


class MessageStatus(Enum):
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


@storefront.entity(part_of="Message")
class Reply:
    reply_text: Text(required=True)
    replied_by: Identifier()
    from_admin: Boolean(default=True)
    created_at: DateTime(default=now)


@storefront.aggregate
class Message:
    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    subject: String(max_length=200)
    message: Text(required=True)
    status: String(choices=MessageStatus, default=MessageStatus.UNREAD.value)
    replies: HasMany(Reply)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @classmethod
    def receive(cls, name, email, message, subject=None):
        from storefront.support.events import MessageReceived

        timestamp = now()
        contact = cls(
            name=name.strip(),
            email=email,
            subject=subject,
            message=message.strip(),
            status=MessageStatus.UNREAD.value,
            created_at=timestamp,
            updated_at=timestamp,
        )
        contact.raise_(
            MessageReceived(
                message_id=contact.id,
                name=contact.name,
                email=contact.email,
                subject=subject,
            )
        )
        return contact

    def mark_read(self):
        if self.status == MessageStatus.UNREAD.value:
            self.status = MessageStatus.READ.value
            self.updated_at = now()

    def reply(self, reply_text, replied_by=None):
        from storefront.support.events import MessageReplied

        if not reply_text or not reply_text.strip():
            raise ValidationError({"reply_text": ["Reply text is required"]})

        reply = Reply(reply_text=reply_text.strip(), replied_by=replied_by, from_admin=True)
        self.add_replies(reply)
        self.status = MessageStatus.REPLIED.value
        self.updated_at = now()

        self.raise_(
            MessageReplied(
                message_id=self.id,
                name=self.name,
                email=self.email,
                subject=self.subject,
                original_message=self.message,
                reply_text=reply.reply_text,
            )
        )
        return reply

    def archive(self):
        self.status = MessageStatus.ARCHIVED.value
        self.updated_at = now()
