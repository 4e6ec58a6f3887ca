"""Order history for shoppers and order management for admins."""

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from storefront.identity.session import require_admin, require_user
from storefront.identity.user.user import User
from storefront.orders.api.schemas import (
    OrderResponse,
    OrderStatusLiteral,
    OrderSummaryResponse,
    StatusResponse,
    TrackingNumberRequest,
    UpdateOrderStatusRequest,
)
from storefront.orders.management import SetTrackingNumber, UpdateOrderStatus
from storefront.orders.order import Order

order_router = APIRouter(prefix="/orders", tags=["orders"])
admin_order_router = APIRouter(prefix="/admin/orders", tags=["admin"])


# ---------------------------------------------------------------------------
# Shopper
# ---------------------------------------------------------------------------
@order_router.get("", response_model=list[OrderSummaryResponse])
async def my_orders(user: User = Depends(require_user)) -> list[OrderSummaryResponse]:
    orders = current_domain.repository_for(Order).for_user(str(user.id))
    return [OrderSummaryResponse.model_validate(o) for o in orders]


@order_router.get("/{order_number}", response_model=OrderResponse)
async def get_order(order_number: str, user: User = Depends(require_user)) -> OrderResponse:
    order = current_domain.repository_for(Order).find_by_order_number(order_number)
    # Other shoppers' orders are reported as missing
    if order is None or (str(order.user_id) != str(user.id) and not user.is_admin):
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderResponse.from_order(order)


# ---------------------------------------------------------------------------
# Admin
# ---------------------------------------------------------------------------
@admin_order_router.get("", response_model=list[OrderSummaryResponse])
async def list_orders(
    status: OrderStatusLiteral | None = None,
    admin: User = Depends(require_admin),
) -> list[OrderSummaryResponse]:
    orders = current_domain.repository_for(Order).list_orders(status=status)
    return [OrderSummaryResponse.model_validate(o) for o in orders]


@admin_order_router.get("/{order_id}", response_model=OrderResponse)
async def admin_get_order(order_id: str, admin: User = Depends(require_admin)) -> OrderResponse:
    return OrderResponse.from_order(current_domain.repository_for(Order).get(order_id))


@admin_order_router.put("/{order_id}/status", response_model=StatusResponse)
async def update_order_status(
    order_id: str, body: UpdateOrderStatusRequest, admin: User = Depends(require_admin)
) -> StatusResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status, note=body.note, changed_by=str(admin.id))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@admin_order_router.put("/{order_id}/tracking", response_model=StatusResponse)
async def set_tracking_number(
    order_id: str, body: TrackingNumberRequest, admin: User = Depends(require_admin)
) -> StatusResponse:
    command = SetTrackingNumber(order_id=order_id, tracking_number=body.tracking_number, changed_by=str(admin.id))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
