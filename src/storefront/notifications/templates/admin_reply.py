"""Reply to a contact message, quoting the customer's original text."""

from storefront.notifications.templates.layout import paragraphs_html, wrap_html


class AdminReplyTemplate:
    sender = "info"

    @staticmethod
    def render(context: dict) -> dict:
        subject = context.get("subject") or "your message"
        quoted = "\n".join(f"> {line}" for line in context["original_message"].splitlines())
        text = f"Hi {context['name']},\n\n{context['reply_text']}"
        return {
            "subject": f"Re: {subject}",
            "body": f"{text}\n\n{quoted}",
            "html": wrap_html(
                f"Re: {subject}",
                paragraphs_html(text)
                + '<blockquote style="color:#777;border-left:3px solid #ddd;padding-left:12px;">'
                + paragraphs_html(context["original_message"])
                + "</blockquote>",
            ),
        }
