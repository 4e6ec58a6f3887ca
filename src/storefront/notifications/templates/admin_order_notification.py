"""New-order notification for the shop owner."""

from storefront.notifications.templates.layout import button_html, paragraphs_html, wrap_html
from storefront.shared.money import format_money


class AdminOrderNotificationTemplate:
    sender = "orders"

    @staticmethod
    def render(context: dict) -> dict:
        total = format_money(context["total"], context.get("currency", "SEK"))
        count = sum(item["quantity"] for item in context.get("items", []))
        url = f"{context['site_url']}/admin/orders/{context['order_id']}"
        text = (
            f"New order {context['order_number']} from {context['email']}.\n\n"
            f"Items: {count}\nTotal: {total}\nPayment: {context['payment_method']} ({context['payment_status']})"
        )
        return {
            "subject": f"New order {context['order_number']} ({total})",
            "body": f"{text}\n\n{url}",
            "html": wrap_html("New order", paragraphs_html(text) + button_html(url, "Open order")),
        }
