"""Contact messages: commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.shared.email import validate_email
from storefront.support.message import Message


@storefront.command(part_of="Message")
class SubmitContactMessage:
    name: String(required=True, min_length=1, max_length=100)
    email: String(required=True, max_length=254)
    subject: String(max_length=200)
    message: Text(required=True)


@storefront.command(part_of="Message")
class MarkMessageRead:
    message_id: Identifier(required=True)


@storefront.command(part_of="Message")
class ReplyToMessage:
    message_id: Identifier(required=True)
    reply_text: Text(required=True)
    replied_by: Identifier()


@storefront.command(part_of="Message")
class ArchiveMessage:
    message_id: Identifier(required=True)


@storefront.command_handler(part_of=Message)
class ManageMessageHandler:
    @handle(SubmitContactMessage)
    def submit_message(self, command):
        message = Message.receive(
            name=command.name,
            email=validate_email(command.email),
            subject=command.subject,
            message=command.message,
        )
        current_domain.repository_for(Message).add(message)
        return str(message.id)

    @handle(MarkMessageRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(Message)
        message = repo.get(command.message_id)
        message.mark_read()
        repo.add(message)

    @handle(ReplyToMessage)
    def reply(self, command):
        repo = current_domain.repository_for(Message)
        message = repo.get(command.message_id)
        reply = message.reply(command.reply_text, replied_by=command.replied_by)
        repo.add(message)
        return str(reply.id)

    @handle(ArchiveMessage)
    def archive(self, command):
        repo = current_domain.repository_for(Message)
        message = repo.get(command.message_id)
        message.archive()
        repo.add(message)
