from storefront.notifications.templates.layout import paragraphs_html, wrap_html


class ContactConfirmationTemplate:
    sender = "info"

    @staticmethod
    def render(context: dict) -> dict:
        subject = context.get("subject") or "your message"
        text = (
            f"Hi {context['name']},\n\n"
            f"Thanks for getting in touch about \"{subject}\". "
            "We have received your message and will reply as soon as we can."
        )
        return {
            "subject": "We received your message",
            "body": text,
            "html": wrap_html("Thanks for your message", paragraphs_html(text)),
        }
