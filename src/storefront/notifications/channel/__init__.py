"""Email channel registry.

Returns the Resend adapter when ``RESEND_API_KEY`` is configured and the
in-memory fake otherwise. The instance is cached until ``reset_channels``.
"""

from storefront.notifications.channel.email_port import EmailPort
from storefront.utils.config import get_resend_api_key

_email_channel: EmailPort | None = None


def get_email_channel() -> EmailPort:
    global _email_channel
    if _email_channel is None:
        api_key = get_resend_api_key()
        if api_key:
            from storefront.notifications.channel.resend_email import ResendEmailAdapter

            _email_channel = ResendEmailAdapter(api_key)
        else:
            from storefront.notifications.channel.fake_email import FakeEmailAdapter

            _email_channel = FakeEmailAdapter()
    return _email_channel


def set_email_channel(channel: EmailPort) -> None:
    global _email_channel
    _email_channel = channel


def reset_channels():
    """Reset the channel singleton (useful for testing)."""
    global _email_channel
    _email_channel = None
