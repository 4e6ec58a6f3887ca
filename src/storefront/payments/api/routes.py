"""Payment provider callbacks."""

import structlog
from fastapi import APIRouter, Header, HTTPException, Request
from protean.utils.globals import current_domain

from storefront.orders.management import MarkOrderPaid, MarkPaymentFailed
from storefront.payments.api.schemas import WebhookResponse
from storefront.payments.gateway import get_gateway

logger = structlog.get_logger(__name__)

payment_router = APIRouter(prefix="/payments", tags=["payments"])

_STRIPE_EVENTS = {
    "payment_intent.succeeded": MarkOrderPaid,
    "payment_intent.payment_failed": MarkPaymentFailed,
}


@payment_router.post("/stripe/webhook", response_model=WebhookResponse)
async def stripe_webhook(
    request: Request,
    stripe_signature: str | None = Header(default=None),
) -> WebhookResponse:
    """Receive Stripe events and reconcile order payment status."""
    payload = await request.body()
    event = get_gateway("stripe").verify_webhook(payload, stripe_signature)
    if event is None:
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    event_type = event.get("type")
    command_cls = _STRIPE_EVENTS.get(event_type)
    if command_cls is None:
        logger.debug("Ignoring Stripe event", event_type=event_type)
        return WebhookResponse()

    payment_intent_id = event.get("data", {}).get("object", {}).get("id")
    if not payment_intent_id:
        raise HTTPException(status_code=400, detail="Missing payment intent")

    current_domain.process(command_cls(payment_intent_id=payment_intent_id), asynchronous=False)
    logger.info("Stripe event processed", event_type=event_type, payment_intent_id=payment_intent_id)
    return WebhookResponse()
