"""Render a template and hand it to the email channel.

Delivery problems never propagate: the request that triggered the email
has already succeeded.
"""

import structlog

from storefront.notifications.channel import get_email_channel
from storefront.notifications.templates import get_template
from storefront.settings.store_settings import find_store_settings
from storefront.utils.config import get_email_senders, get_site_url

logger = structlog.get_logger(__name__)


def base_context() -> dict:
    settings = find_store_settings()
    return {
        "site_url": get_site_url(),
        "store_name": settings.store_name if settings and settings.store_name else "Storefront",
    }


def send_email(kind: str, to: str, context: dict) -> dict | None:
    template = get_template(kind)
    try:
        content = template.render({**base_context(), **context})
        result = get_email_channel().send(
            to=to,
            subject=content["subject"],
            body=content["body"],
            html_body=content.get("html"),
            sender=get_email_senders()[template.sender],
        )
    except Exception:
        logger.exception("Email failed", kind=kind, to=to)
        return None

    if result.get("status") == "sent":
        logger.info("Email sent", kind=kind, to=to, message_id=result.get("message_id"))
    else:
        logger.warning("Email not delivered", kind=kind, to=to, error=result.get("error"))
    return result
