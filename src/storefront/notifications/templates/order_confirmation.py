"""Order confirmation template: sent to the customer when an order is placed."""

from html import escape

from storefront.notifications.templates.layout import paragraphs_html, wrap_html
from storefront.shared.money import format_money


def _item_label(item: dict) -> str:
    if item.get("variant_name"):
        return f"{item['product_name']} ({item['variant_name']})"
    return item["product_name"]


def order_summary_lines(context: dict) -> list[tuple[str, str]]:
    currency = context.get("currency", "SEK")
    rows = [("Subtotal", format_money(context["subtotal"], currency))]
    if context.get("discount_amount"):
        rows.append(("Discount", f"-{format_money(context['discount_amount'], currency)}"))
    rows.append(("Shipping", format_money(context["shipping_cost"], currency)))
    rows.append(("Total", format_money(context["total"], currency)))
    rows.append(("Incl. VAT", format_money(context["tax"], currency)))
    return rows


class OrderConfirmationTemplate:
    sender = "orders"

    @staticmethod
    def render(context: dict) -> dict:
        currency = context.get("currency", "SEK")
        items = context.get("items", [])
        shipping = context["shipping"]

        item_lines = "\n".join(
            f"{item['quantity']} x {_item_label(item)}  {format_money(item['total'], currency)}" for item in items
        )
        totals_lines = "\n".join(f"{label}: {value}" for label, value in order_summary_lines(context))
        address = "\n".join(
            part
            for part in (
                shipping["name"],
                shipping["address"],
                shipping.get("address_line2"),
                f"{shipping['postal_code']} {shipping['city']}",
                shipping["country"],
            )
            if part
        )

        gift_message = context.get("gift_message")
        gift_text = f"Gift message: {gift_message}\n\n" if gift_message else ""

        body = (
            f"Thank you for your order!\n\n"
            f"Order number: {context['order_number']}\n\n"
            f"{item_lines}\n\n{totals_lines}\n\n"
            f"Shipping to:\n{address}\n\n"
            f"{gift_text}"
            "We'll let you know when your order ships."
        )

        rows_html = "".join(
            f"<tr><td>{item['quantity']} x {escape(_item_label(item))}</td>"
            f'<td style="text-align:right">{format_money(item["total"], currency)}</td></tr>'
            for item in items
        )
        totals_html = "".join(
            f'<tr><td>{label}</td><td style="text-align:right">{value}</td></tr>'
            for label, value in order_summary_lines(context)
        )
        html = wrap_html(
            "Thank you for your order",
            paragraphs_html(f"Order number: {context['order_number']}")
            + f'<table style="width:100%">{rows_html}{totals_html}</table>'
            + paragraphs_html(f"Shipping to:\n{address}")
            + (paragraphs_html(gift_text.strip()) if gift_text else ""),
        )

        return {
            "subject": f"Order confirmation {context['order_number']}",
            "body": body,
            "html": html,
        }
