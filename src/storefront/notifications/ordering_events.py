"""Order emails: reacts to Order events.

Handlers load the order to render its lines and totals.
"""

import structlog
from protean import handle
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.notifications.dispatch import send_email
from storefront.orders.events import OrderPlaced, OrderShipped
from storefront.orders.order import Order
from storefront.utils.config import get_admin_email

logger = structlog.get_logger(__name__)


def order_context(order: Order) -> dict:
    return {
        "order_id": str(order.id),
        "order_number": order.order_number,
        "email": order.email,
        "currency": order.currency,
        "payment_method": order.payment_method,
        "payment_status": order.payment_status,
        "subtotal": order.subtotal,
        "discount_amount": order.discount_amount,
        "shipping_cost": order.shipping_cost,
        "tax": order.tax,
        "total": order.total,
        "items": [
            {
                "product_name": item.product_name,
                "variant_name": item.variant_name,
                "quantity": item.quantity,
                "total": item.total,
            }
            for item in order.items
        ],
        "shipping": {
            "name": order.shipping_name,
            "address": order.shipping_address,
            "address_line2": order.shipping_address_line2,
            "city": order.shipping_city,
            "postal_code": order.shipping_postal_code,
            "country": order.shipping_country,
        },
        "gift_message": order.gift_message,
    }


@storefront.event_handler(part_of=Order)
class OrderEmailsHandler:
    @handle(OrderPlaced)
    def on_order_placed(self, event: OrderPlaced) -> None:
        order = current_domain.repository_for(Order).get(event.order_id)
        context = order_context(order)
        send_email("order_confirmation", order.email, context)

        admin_email = get_admin_email()
        if admin_email:
            send_email("admin_order_notification", admin_email, context)
        else:
            logger.info("Admin order notification skipped", order_number=order.order_number)

    @handle(OrderShipped)
    def on_order_shipped(self, event: OrderShipped) -> None:
        send_email(
            "shipping_notification",
            event.email,
            {"order_number": event.order_number, "tracking_number": event.tracking_number},
        )
