"""Back-office dashboard and customer directory."""

from fastapi import APIRouter, Depends, HTTPException, Query

from storefront.admin.api.schemas import (
    CustomerDetailResponse,
    CustomerResponse,
    DashboardStatsResponse,
    LowStockResponse,
)
from storefront.admin.customers import find_customer, list_customers
from storefront.admin.stats import DEFAULT_LOW_STOCK_THRESHOLD, dashboard_stats, low_stock_products
from storefront.catalogue.api.schemas import ProductSummaryResponse
from storefront.identity.session import require_admin
from storefront.settings.store_settings import find_store_settings

admin_router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@admin_router.get("/stats", response_model=DashboardStatsResponse)
async def stats() -> DashboardStatsResponse:
    return DashboardStatsResponse(**dashboard_stats())


@admin_router.get("/low-stock", response_model=LowStockResponse)
async def low_stock(threshold: int | None = Query(default=None, ge=0)) -> LowStockResponse:
    if threshold is None:
        settings = find_store_settings()
        threshold = settings.low_stock_threshold if settings is not None else DEFAULT_LOW_STOCK_THRESHOLD
    products = sorted(low_stock_products(threshold), key=lambda p: p.stock_quantity or 0)
    return LowStockResponse(
        threshold=threshold,
        products=[ProductSummaryResponse.model_validate(p) for p in products],
    )


@admin_router.get("/customers", response_model=list[CustomerResponse])
async def customers(search: str | None = None) -> list[CustomerResponse]:
    return [CustomerResponse.model_validate(c) for c in list_customers(search)]


@admin_router.get("/customers/{customer_id}", response_model=CustomerDetailResponse)
async def customer_detail(customer_id: str) -> CustomerDetailResponse:
    customer = find_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return CustomerDetailResponse.model_validate(customer)
