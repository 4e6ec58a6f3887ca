"""Resend email adapter: transactional email through the Resend API."""

import resend
import structlog

from storefront.notifications.channel.email_port import EmailPort
from storefront.utils.config import get_email_senders

logger = structlog.get_logger(__name__)


class ResendEmailAdapter(EmailPort):
    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(
        self,
        to: str,
        subject: str,
        body: str,
        html_body: str | None = None,
        sender: str | None = None,
    ) -> dict:
        params: resend.Emails.SendParams = {
            "from": sender or get_email_senders()["noreply"],
            "to": [to],
            "subject": subject,
            "text": body,
        }
        if html_body:
            params["html"] = html_body

        resend.api_key = self.api_key
        try:
            response = resend.Emails.send(params)
        except Exception as exc:
            logger.warning("Resend rejected email", to=to, subject=subject, error=str(exc))
            return {"message_id": None, "status": "failed", "error": str(exc)}

        return {"message_id": response.get("id"), "status": "sent"}
