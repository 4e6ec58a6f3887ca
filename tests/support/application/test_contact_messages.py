"""Application tests for the contact form and admin replies."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.support.management import MarkMessageRead, ReplyToMessage, SubmitContactMessage
from storefront.support.message import Message


def _submit(**overrides):
    defaults = {"name": "Anna", "email": "anna@example.com", "subject": "Custom order", "message": "Larger bowls?"}
    defaults.update(overrides)
    return current_domain.process(SubmitContactMessage(**defaults), asynchronous=False)


class TestContactMessages:
    def test_submission_confirms_to_sender(self, fake_email):
        message_id = _submit()
        assert current_domain.repository_for(Message).get(message_id).status == "unread"
        assert fake_email.sent_to("anna@example.com")[0]["subject"] == "We received your message"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            _submit(email="not-an-email")

    def test_reply_emails_sender(self, fake_email):
        message_id = _submit()
        current_domain.process(MarkMessageRead(message_id=message_id), asynchronous=False)
        current_domain.process(
            ReplyToMessage(message_id=message_id, reply_text="Yes, up to 30 cm.", replied_by="admin-1"),
            asynchronous=False,
        )

        message = current_domain.repository_for(Message).get(message_id)
        assert message.status == "replied"
        assert len(message.replies) == 1

        reply_email = fake_email.sent_to("anna@example.com")[-1]
        assert reply_email["subject"] == "Re: Custom order"
        assert "Yes, up to 30 cm." in reply_email["body"]

    def test_unread_count(self):
        first = _submit()
        _submit()
        current_domain.process(MarkMessageRead(message_id=first), asynchronous=False)
        assert current_domain.repository_for(Message).count_unread() == 1
