"""Shipping notification: sent when a tracking number is added."""

from storefront.notifications.templates.layout import paragraphs_html, wrap_html


class ShippingNotificationTemplate:
    sender = "orders"

    @staticmethod
    def render(context: dict) -> dict:
        text = (
            f"Good news! Your order {context['order_number']} is on its way.\n\n"
            f"Tracking number: {context['tracking_number']}"
        )
        return {
            "subject": f"Your order {context['order_number']} has shipped",
            "body": text,
            "html": wrap_html("Your order has shipped", paragraphs_html(text)),
        }
