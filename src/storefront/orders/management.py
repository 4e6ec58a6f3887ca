"""Order status management: admin commands and payment callbacks."""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.orders.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id: Identifier(required=True)
    status: String(required=True, choices=OrderStatus)
    note: Text()
    changed_by: Identifier()


@storefront.command(part_of="Order")
class SetTrackingNumber:
    order_id: Identifier(required=True)
    tracking_number: String(required=True, min_length=1, max_length=100)
    changed_by: Identifier()


@storefront.command(part_of="Order")
class MarkOrderPaid:
    payment_intent_id: String(required=True, max_length=255)


@storefront.command(part_of="Order")
class MarkPaymentFailed:
    payment_intent_id: String(required=True, max_length=255)


@storefront.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status
        order.change_status(command.status, note=command.note, changed_by=command.changed_by)
        repo.add(order)
        logger.info(
            "Order status changed",
            order_number=order.order_number,
            previous_status=previous,
            new_status=order.status,
        )

    @handle(SetTrackingNumber)
    def set_tracking_number(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.set_tracking_number(command.tracking_number.strip(), changed_by=command.changed_by)
        repo.add(order)
        logger.info("Order shipped", order_number=order.order_number, tracking_number=order.tracking_number)

    @handle(MarkOrderPaid)
    def mark_paid(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.find_by_payment_intent(command.payment_intent_id)
        if order is None:
            logger.warning("Payment confirmation for unknown order", payment_intent_id=command.payment_intent_id)
            return None
        order.mark_paid()
        repo.add(order)
        return str(order.id)

    @handle(MarkPaymentFailed)
    def mark_payment_failed(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.find_by_payment_intent(command.payment_intent_id)
        if order is None:
            logger.warning("Payment failure for unknown order", payment_intent_id=command.payment_intent_id)
            return None
        order.mark_payment_failed()
        repo.add(order)
        return str(order.id)
