"""Email verification template: sent at registration and on resend."""

from storefront.notifications.templates.layout import button_html, paragraphs_html, wrap_html


class VerificationTemplate:
    sender = "noreply"

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name") or "there"
        url = f"{context['site_url']}/verify-email?token={context['token']}"
        intro = f"Hi {name},\n\nPlease confirm your email address to activate your account."
        outro = "The link is valid for 24 hours. If you did not create an account, you can ignore this email."
        return {
            "subject": "Verify your email address",
            "body": f"{intro}\n\n{url}\n\n{outro}",
            "html": wrap_html(
                "Verify your email",
                paragraphs_html(intro) + button_html(url, "Verify email") + paragraphs_html(outro),
            ),
        }
