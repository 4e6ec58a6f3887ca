from datetime import datetime

from pydantic import BaseModel, ConfigDict

from storefront.catalogue.api.schemas import ProductSummaryResponse


class DashboardStatsResponse(BaseModel):
    total_products: int
    active_products: int
    total_orders: int
    pending_orders: int
    revenue: float
    total_categories: int
    total_users: int
    low_stock_products: int
    unread_messages: int


class LowStockResponse(BaseModel):
    threshold: int
    products: list[ProductSummaryResponse]


class CustomerOrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    order_number: str
    status: str
    total: float
    created_at: datetime


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str | None = None
    phone: str | None = None
    is_registered: bool
    order_count: int
    total_spent: float
    last_order_date: datetime | None = None
    created_at: datetime | None = None


class CustomerDetailResponse(CustomerResponse):
    orders: list[CustomerOrderResponse]
