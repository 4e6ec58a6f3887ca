from storefront.notifications.templates.layout import button_html, paragraphs_html, wrap_html


class PasswordResetTemplate:
    sender = "noreply"

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name") or "there"
        url = f"{context['site_url']}/reset-password?token={context['token']}"
        intro = f"Hi {name},\n\nWe received a request to reset your password."
        outro = "The link expires in 1 hour. If you did not ask for this, no action is needed."
        return {
            "subject": "Reset your password",
            "body": f"{intro}\n\n{url}\n\n{outro}",
            "html": wrap_html(
                "Reset your password",
                paragraphs_html(intro) + button_html(url, "Choose a new password") + paragraphs_html(outro),
            ),
        }
