"""Starting payments with the providers before an order exists."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.checkout.pricing import prepare_checkout
from storefront.domain import storefront
from storefront.payments.gateway import get_gateway
from storefront.shared.money import to_minor_units

logger = structlog.get_logger(__name__)


@storefront.command(part_of="ShoppingCart")
class CreateStripePaymentIntent:
    user_id: Identifier()
    session_id: String(max_length=255)
    email: String(max_length=254)
    shipping_region_id: Identifier()
    shipping_country: String(max_length=2)
    discount_code: String(max_length=50)


@storefront.command(part_of="ShoppingCart")
class CreatePayPalOrder:
    user_id: Identifier()
    session_id: String(max_length=255)
    email: String(max_length=254)
    shipping_region_id: Identifier()
    shipping_country: String(max_length=2)
    discount_code: String(max_length=50)


@storefront.command(part_of="ShoppingCart")
class CapturePayPalOrder:
    paypal_order_id: String(required=True, max_length=255)


def _checkout_for(command):
    if not command.user_id and not command.session_id:
        raise ValidationError({"session": ["Session required"]})

    cart = current_domain.repository_for(ShoppingCart).find_for_owner(
        user_id=command.user_id, session_id=command.session_id
    )
    return prepare_checkout(
        cart,
        region_id=command.shipping_region_id,
        country_code=command.shipping_country,
        discount_code=command.discount_code,
        user_id=command.user_id,
        email=command.email,
    )


def _metadata(command, checkout):
    return {
        "email": command.email,
        "user_id": command.user_id,
        "discount_code": checkout["discount"].code if checkout["discount"] else None,
        "shipping_region": checkout["region"].code if checkout["region"] else None,
    }


@storefront.command_handler(part_of=ShoppingCart)
class CheckoutPaymentHandler:
    @handle(CreateStripePaymentIntent)
    def create_stripe_payment_intent(self, command):
        checkout = _checkout_for(command)
        totals = checkout["totals"]
        if to_minor_units(totals["total"]) <= 0:
            raise ValidationError({"total": ["Order total must be greater than zero"]})

        result = get_gateway("stripe").create_payment(
            amount=totals["total"],
            currency=checkout["currency"],
            reference="storefront-checkout",
            metadata=_metadata(command, checkout),
        )
        if not result.success:
            raise ValidationError({"payment": [result.failure_reason or "Failed to create payment intent"]})

        logger.info("Payment created", provider="stripe", payment_id=result.payment_id, total=totals["total"])
        return {
            "client_secret": result.client_secret,
            "payment_intent_id": result.payment_id,
            "currency": checkout["currency"],
            **totals,
        }

    @handle(CreatePayPalOrder)
    def create_paypal_order(self, command):
        checkout = _checkout_for(command)
        totals = checkout["totals"]
        if totals["total"] <= 0:
            raise ValidationError({"total": ["Order total must be greater than zero"]})

        result = get_gateway("paypal").create_payment(
            amount=totals["total"],
            currency=checkout["currency"],
            reference="storefront-checkout",
            metadata=_metadata(command, checkout),
            breakdown={
                "item_total": totals["subtotal"],
                "shipping": totals["shipping_cost"],
                "discount": totals["discount_amount"],
            },
        )
        if not result.success:
            raise ValidationError({"payment": [result.failure_reason or "Failed to create PayPal order"]})

        logger.info("Payment created", provider="paypal", payment_id=result.payment_id, total=totals["total"])
        return {
            "paypal_order_id": result.payment_id,
            "approval_url": result.approval_url,
            "currency": checkout["currency"],
            **totals,
        }

    @handle(CapturePayPalOrder)
    def capture_paypal_order(self, command):
        result = get_gateway("paypal").capture_payment(command.paypal_order_id)
        if not result.success:
            raise ValidationError({"payment": [result.failure_reason or "Failed to capture PayPal payment"]})

        logger.info("Payment captured", provider="paypal", payment_id=result.payment_id, status=result.status)
        return {"paypal_order_id": result.payment_id, "status": result.status}
