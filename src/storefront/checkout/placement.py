"""Placing an order once the shopper has paid."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.checkout.pricing import prepare_checkout
from storefront.discounts.usage import record_discount_usage
from storefront.domain import storefront
from storefront.identity.shared.email import validate_email
from storefront.orders.order import Order, PaymentMethod, PaymentStatus
from storefront.payments.gateway import get_gateway
from storefront.shared.money import to_minor_units
from storefront.shared.text import generate_order_number

logger = structlog.get_logger(__name__)

# Provider statuses accepted as a completed (or settling) payment
_ACCEPTED_STATUSES = {
    PaymentMethod.STRIPE.value: {"succeeded", "processing"},
    PaymentMethod.PAYPAL.value: {"COMPLETED"},
}
_PAID_STATUSES = {"succeeded", "COMPLETED"}


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier()
    session_id: String(max_length=255)
    email: String(max_length=254)
    shipping_name: String(required=True, max_length=200)
    shipping_address: String(required=True, max_length=255)
    shipping_address_line2: String(max_length=255)
    shipping_city: String(required=True, max_length=100)
    shipping_postal_code: String(required=True, max_length=20)
    shipping_country: String(required=True, max_length=2)
    shipping_phone: String(max_length=30)
    shipping_region_id: Identifier()
    payment_method: String(required=True, choices=PaymentMethod)
    payment_id: String(required=True, max_length=255)
    discount_code: String(max_length=50)
    notes: Text()
    gift_message: String(max_length=500)


def verify_payment(payment_method: str, payment_id: str, total: float, currency: str) -> str:
    """Ask the provider about the payment and return its status.

    The payment must be completed (or settling) and cover exactly ``total``
    in ``currency``; a payment id already attached to an order is refused.
    """
    if current_domain.repository_for(Order).find_by_payment_intent(payment_id) is not None:
        raise ValidationError({"payment": ["Payment has already been used for another order"]})

    payment = get_gateway(payment_method).retrieve_payment(payment_id)
    if payment.status not in _ACCEPTED_STATUSES[payment_method]:
        raise ValidationError({"payment": [f"Payment not completed. Status: {payment.status}"]})

    if (
        payment.amount is None
        or to_minor_units(payment.amount) != to_minor_units(total)
        or (payment.currency or "").upper() != currency.upper()
    ):
        logger.warning(
            "Payment does not match order",
            provider=payment_method,
            payment_id=payment_id,
            paid=payment.amount,
            paid_currency=payment.currency,
            expected=total,
            currency=currency,
        )
        raise ValidationError({"payment": ["Payment amount does not match order total"]})

    logger.info("Payment verified", provider=payment_method, payment_id=payment_id, status=payment.status)
    return payment.status


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        if not command.user_id and not command.session_id:
            raise ValidationError({"session": ["Session required"]})
        if not command.email:
            raise ValidationError({"email": ["Email is required"]})
        email = validate_email(command.email)

        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.find_for_owner(user_id=command.user_id, session_id=command.session_id)

        checkout = prepare_checkout(
            cart,
            region_id=command.shipping_region_id,
            country_code=command.shipping_country,
            discount_code=command.discount_code,
            user_id=command.user_id,
            email=email,
        )
        provider_status = verify_payment(
            command.payment_method, command.payment_id, checkout["totals"]["total"], checkout["currency"]
        )
        payment_status = (
            PaymentStatus.PAID.value if provider_status in _PAID_STATUSES else PaymentStatus.PENDING.value
        )

        region = checkout["region"]
        discount = checkout["discount"]
        totals = checkout["totals"]

        order = Order.place(
            order_number=generate_order_number(),
            email=email,
            payment_method=command.payment_method,
            lines=checkout["lines"],
            totals=totals,
            shipping={
                "shipping_name": command.shipping_name,
                "shipping_address": command.shipping_address,
                "shipping_address_line2": command.shipping_address_line2,
                "shipping_city": command.shipping_city,
                "shipping_postal_code": command.shipping_postal_code,
                "shipping_country": command.shipping_country.upper(),
                "shipping_phone": command.shipping_phone,
            },
            payment_status=payment_status,
            user_id=command.user_id,
            payment_intent_id=command.payment_id,
            currency=checkout["currency"],
            discount_code=discount.code if discount else None,
            shipping_region_id=region.id if region else None,
            notes=command.notes,
            gift_message=command.gift_message,
        )
        current_domain.repository_for(Order).add(order)

        if discount is not None and totals["discount_amount"] > 0:
            record_discount_usage(
                discount_code_id=discount.id,
                order_id=order.id,
                email=email,
                discount_amount=totals["discount_amount"],
                user_id=command.user_id,
            )

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_number=order.order_number,
            total=order.total,
            payment_method=order.payment_method,
            status=order.status,
        )
        return {
            "id": str(order.id),
            "order_number": order.order_number,
            "total": order.total,
            "status": order.status,
        }
