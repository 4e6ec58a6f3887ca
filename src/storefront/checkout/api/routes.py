"""Checkout endpoints: totals, discounts, payment start and order placement."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.cart.api import CartOwner, cart_owner
from storefront.checkout.api.schemas import (
    CapturePayPalRequest,
    CapturePayPalResponse,
    CheckoutContextRequest,
    PayPalOrderResponse,
    PlaceOrderRequest,
    PlaceOrderResponse,
    StripeIntentResponse,
    TaxRequest,
    TaxResponse,
    TotalsResponse,
    ValidateDiscountRequest,
    ValidateDiscountResponse,
)
from storefront.checkout.payment import CapturePayPalOrder, CreatePayPalOrder, CreateStripePaymentIntent
from storefront.checkout.placement import PlaceOrder
from storefront.checkout.pricing import calculate_tax_from_inclusive, prepare_checkout
from storefront.discounts.validation import calculate_discount_amount, validate_discount_code
from storefront.identity.session import optional_user
from storefront.identity.user.user import User
from storefront.settings.store_settings import effective_tax_rate, store_currency

checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


def _context_fields(body: CheckoutContextRequest, owner: CartOwner) -> dict:
    return {
        "user_id": owner.user_id,
        "session_id": None if owner.user else owner.session_id,
        "email": body.email or owner.email,
        "shipping_region_id": body.shipping_region_id,
        "shipping_country": body.shipping_country,
        "discount_code": body.discount_code,
    }


@checkout_router.post("/tax", response_model=TaxResponse)
async def tax(body: TaxRequest) -> TaxResponse:
    rate = effective_tax_rate()
    return TaxResponse(tax=calculate_tax_from_inclusive(body.subtotal, rate), tax_rate=rate)


@checkout_router.post("/validate-discount", response_model=ValidateDiscountResponse)
async def validate_discount(
    body: ValidateDiscountRequest, user: User | None = Depends(optional_user)
) -> ValidateDiscountResponse:
    result = validate_discount_code(
        body.code,
        body.subtotal,
        user_id=str(user.id) if user else None,
        email=body.email or (user.email if user else None),
        currency=store_currency(),
    )
    if not result.valid:
        raise HTTPException(status_code=400, detail=result.error)

    discount = result.discount_code
    return ValidateDiscountResponse(
        valid=True,
        code=discount.code,
        discount_type=discount.discount_type,
        discount_value=discount.discount_value,
        discount_amount=calculate_discount_amount(discount, body.subtotal),
    )


@checkout_router.post("/totals", response_model=TotalsResponse)
async def totals(body: CheckoutContextRequest, owner: CartOwner = Depends(cart_owner)) -> TotalsResponse:
    checkout = prepare_checkout(
        owner.find_cart(),
        region_id=body.shipping_region_id,
        country_code=body.shipping_country,
        discount_code=body.discount_code,
        user_id=owner.user_id,
        email=body.email or owner.email,
    )
    return TotalsResponse(currency=checkout["currency"], **checkout["totals"])


@checkout_router.post("/stripe/payment-intent", response_model=StripeIntentResponse)
async def create_payment_intent(
    body: CheckoutContextRequest, owner: CartOwner = Depends(cart_owner)
) -> StripeIntentResponse:
    result = current_domain.process(CreateStripePaymentIntent(**_context_fields(body, owner)), asynchronous=False)
    return StripeIntentResponse(**result)


@checkout_router.post("/paypal/create-order", response_model=PayPalOrderResponse)
async def create_paypal_order(
    body: CheckoutContextRequest, owner: CartOwner = Depends(cart_owner)
) -> PayPalOrderResponse:
    result = current_domain.process(CreatePayPalOrder(**_context_fields(body, owner)), asynchronous=False)
    return PayPalOrderResponse(**result)


@checkout_router.post("/paypal/capture-order", response_model=CapturePayPalResponse)
async def capture_paypal_order(body: CapturePayPalRequest) -> CapturePayPalResponse:
    result = current_domain.process(CapturePayPalOrder(paypal_order_id=body.paypal_order_id), asynchronous=False)
    return CapturePayPalResponse(**result)


@checkout_router.post("/create-order", status_code=201, response_model=PlaceOrderResponse)
async def create_order(body: PlaceOrderRequest, owner: CartOwner = Depends(cart_owner)) -> PlaceOrderResponse:
    command = PlaceOrder(
        user_id=owner.user_id,
        session_id=None if owner.user else owner.session_id,
        **{**body.model_dump(exclude_none=True), "email": body.email or owner.email},
    )
    return PlaceOrderResponse(**current_domain.process(command, asynchronous=False))
