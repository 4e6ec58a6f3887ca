"""Stripe payment gateway adapter.

Uses the stripe-python SDK: PaymentIntents for card payments and
``stripe.Webhook.construct_event`` for webhook signatures. Stripe expects
integer minor units and lowercase currency codes.
"""

import stripe
import structlog

from storefront.payments.gateway.port import PaymentDetails, PaymentGateway, PaymentResult
from storefront.shared.money import from_minor_units, to_minor_units

logger = structlog.get_logger(__name__)


class StripeGateway(PaymentGateway):
    provider = "stripe"

    def __init__(self, api_key: str, webhook_secret: str) -> None:
        self.api_key = api_key
        self.webhook_secret = webhook_secret

    def create_payment(self, amount, currency, reference, metadata, breakdown=None) -> PaymentResult:
        try:
            intent = stripe.PaymentIntent.create(
                api_key=self.api_key,
                amount=to_minor_units(amount),
                currency=currency.lower(),
                automatic_payment_methods={"enabled": True},
                description=reference,
                metadata={key: str(value) for key, value in metadata.items() if value is not None},
            )
        except stripe.StripeError as exc:
            logger.warning("Stripe payment intent failed", error=str(exc))
            return PaymentResult(success=False, status="failed", failure_reason=exc.user_message or str(exc))

        logger.info("Stripe payment intent created", payment_id=intent.id, amount=amount)
        return PaymentResult(
            success=True,
            payment_id=intent.id,
            client_secret=intent.client_secret,
            status=intent.status,
        )

    def retrieve_payment(self, payment_id: str) -> PaymentDetails:
        try:
            intent = stripe.PaymentIntent.retrieve(payment_id, api_key=self.api_key)
        except stripe.StripeError as exc:
            logger.warning("Stripe payment intent lookup failed", payment_id=payment_id, error=str(exc))
            return PaymentDetails(status="unknown")
        return PaymentDetails(
            status=intent.status,
            amount=from_minor_units(intent.amount),
            currency=intent.currency.upper(),
        )

    def capture_payment(self, payment_id: str) -> PaymentResult:
        try:
            intent = stripe.PaymentIntent.capture(payment_id, api_key=self.api_key)
        except stripe.StripeError as exc:
            return PaymentResult(success=False, payment_id=payment_id, failure_reason=str(exc))
        return PaymentResult(success=intent.status == "succeeded", payment_id=intent.id, status=intent.status)

    def verify_webhook(self, payload: bytes, signature: str | None) -> dict | None:
        if not self.webhook_secret or not signature:
            return None
        try:
            event = stripe.Webhook.construct_event(payload=payload, sig_header=signature, secret=self.webhook_secret)
        except (ValueError, stripe.SignatureVerificationError) as exc:
            logger.warning("Stripe webhook rejected", error=str(exc))
            return None
        return event.to_dict()
