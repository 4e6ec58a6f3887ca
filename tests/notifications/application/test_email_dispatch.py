"""Application tests for the email handlers reacting to domain events."""

from protean import current_domain

from storefront.notifications.channel import get_email_channel, set_email_channel
from storefront.notifications.channel.fake_email import FakeEmailAdapter
from storefront.notifications.dispatch import send_email
from storefront.settings.management import UpdateStoreSettings


class TestSendEmail:
    def test_uses_sender_mailbox_of_template(self, fake_email):
        send_email("welcome", "anna@example.com", {"name": "Anna"})
        assert fake_email.sent_emails[0]["sender"].endswith("<noreply@storefront.local>")

    def test_store_name_comes_from_settings(self, fake_email):
        current_domain.process(UpdateStoreSettings(store_name="Lerverket"), asynchronous=False)
        send_email("welcome", "anna@example.com", {"name": "Anna"})
        assert fake_email.sent_emails[0]["subject"] == "Welcome to Lerverket!"

    def test_delivery_failure_is_reported_not_raised(self, fake_email):
        fake_email.configure(should_succeed=False, failure_reason="Mailbox full")
        result = send_email("welcome", "anna@example.com", {"name": "Anna"})
        assert result["status"] == "failed"
        assert fake_email.sent_emails == []

    def test_channel_errors_are_swallowed(self):
        class BrokenChannel(FakeEmailAdapter):
            def send(self, *args, **kwargs):
                raise ConnectionError("smtp down")

        set_email_channel(BrokenChannel())
        assert send_email("welcome", "anna@example.com", {"name": "Anna"}) is None

    def test_fake_channel_when_unconfigured(self):
        assert isinstance(get_email_channel(), FakeEmailAdapter)


class TestOrderEmails:
    def test_admin_notified_when_configured(self, monkeypatch, fake_email, make_order):
        monkeypatch.setenv("ADMIN_EMAIL", "owner@example.com")
        order = make_order()

        assert fake_email.sent_to("anna@example.com")[0]["subject"] == f"Order confirmation {order.order_number}"
        admin_mail = fake_email.sent_to("owner@example.com")
        assert admin_mail[0]["subject"] == f"New order {order.order_number} (299.00 SEK)"

    def test_admin_notification_skipped_without_address(self, fake_email, make_order):
        make_order()
        assert {e["to"] for e in fake_email.sent_emails} == {"anna@example.com"}

    def test_failed_delivery_does_not_block_order(self, fake_email, make_order):
        fake_email.configure(should_succeed=False)
        order = make_order()
        assert order.status == "paid"
