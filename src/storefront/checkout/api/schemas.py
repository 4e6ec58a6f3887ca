from typing import Literal

from pydantic import BaseModel, Field


class TaxRequest(BaseModel):
    subtotal: float = Field(ge=0)


class TaxResponse(BaseModel):
    tax: float
    tax_rate: float


class ValidateDiscountRequest(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    subtotal: float = Field(ge=0)
    email: str | None = Field(default=None, max_length=254)


class ValidateDiscountResponse(BaseModel):
    valid: bool
    code: str
    discount_type: str
    discount_value: float
    discount_amount: float


class CheckoutContextRequest(BaseModel):
    email: str | None = Field(default=None, max_length=254)
    shipping_region_id: str | None = None
    shipping_country: str | None = Field(default=None, min_length=2, max_length=2)
    discount_code: str | None = Field(default=None, max_length=50)


class TotalsResponse(BaseModel):
    subtotal: float
    discount_amount: float
    shipping_cost: float
    tax: float
    tax_rate: float
    total: float
    currency: str = "SEK"


class StripeIntentResponse(TotalsResponse):
    client_secret: str | None
    payment_intent_id: str


class PayPalOrderResponse(TotalsResponse):
    paypal_order_id: str
    approval_url: str | None


class CapturePayPalRequest(BaseModel):
    paypal_order_id: str = Field(min_length=1)


class CapturePayPalResponse(BaseModel):
    paypal_order_id: str
    status: str | None


class PlaceOrderRequest(BaseModel):
    email: str | None = Field(default=None, max_length=254)
    shipping_name: str = Field(min_length=1, max_length=200)
    shipping_address: str = Field(min_length=1, max_length=255)
    shipping_address_line2: str | None = Field(default=None, max_length=255)
    shipping_city: str = Field(min_length=1, max_length=100)
    shipping_postal_code: str = Field(min_length=1, max_length=20)
    shipping_country: str = Field(min_length=2, max_length=2)
    shipping_phone: str | None = Field(default=None, max_length=30)
    shipping_region_id: str | None = None
    payment_method: Literal["stripe", "paypal"]
    payment_id: str = Field(min_length=1, max_length=255)
    discount_code: str | None = Field(default=None, max_length=50)
    notes: str | None = None
    gift_message: str | None = Field(default=None, max_length=500)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "anna@example.com",
                    "shipping_name": "Anna Svensson",
                    "shipping_address": "Storgatan 1",
                    "shipping_city": "Stockholm",
                    "shipping_postal_code": "111 22",
                    "shipping_country": "SE",
                    "payment_method": "stripe",
                    "payment_id": "pi_3Nx...",
                }
            ]
        }
    }


class PlaceOrderResponse(BaseModel):
    id: str
    order_number: str
    total: float
    status: str
