"""Pydantic schemas for the Orders API."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

OrderStatusLiteral = Literal["pending", "paid", "processing", "shipped", "delivered", "cancelled", "refunded"]


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    variant_id: str | None = None
    product_name: str
    variant_name: str | None = None
    sku: str | None = None
    price: float
    quantity: int
    total: float


class StatusChangeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    from_status: str | None = None
    to_status: str
    note: str | None = None
    changed_by: str | None = None
    changed_at: datetime


class OrderSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    order_number: str
    email: str
    status: str
    payment_method: str
    payment_status: str
    total: float
    currency: str
    created_at: datetime


class OrderResponse(OrderSummaryResponse):
    user_id: str | None = None
    payment_intent_id: str | None = None
    subtotal: float
    discount_amount: float
    shipping_cost: float
    tax: float
    discount_code: str | None = None
    shipping_name: str
    shipping_address: str
    shipping_address_line2: str | None = None
    shipping_city: str
    shipping_postal_code: str
    shipping_country: str
    shipping_phone: str | None = None
    tracking_number: str | None = None
    notes: str | None = None
    gift_message: str | None = None
    items: list[OrderItemResponse]
    history: list[StatusChangeResponse] = []

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        response = cls.model_validate(order)
        response.history = [StatusChangeResponse.model_validate(c) for c in order.sorted_history()]
        return response


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatusLiteral
    note: str | None = Field(default=None, max_length=1000)


class TrackingNumberRequest(BaseModel):
    tracking_number: str = Field(min_length=1, max_length=100)


class StatusResponse(BaseModel):
    status: str = "ok"
