"""Welcome template: sent once the email address is verified."""

from storefront.notifications.templates.layout import button_html, paragraphs_html, wrap_html


class WelcomeTemplate:
    sender = "noreply"

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name") or "there"
        store_name = context.get("store_name", "our store")
        text = (
            f"Hi {name},\n\n"
            f"Your email is verified and your {store_name} account is ready.\n\n"
            "Happy shopping!"
        )
        return {
            "subject": f"Welcome to {store_name}!",
            "body": text,
            "html": wrap_html("Welcome", paragraphs_html(text) + button_html(context["site_url"], "Visit the shop")),
        }
