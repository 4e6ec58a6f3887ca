"""Dashboard figures for the back office."""

from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product, ProductStatus
from storefront.identity.user.user import User
from storefront.orders.order import REVENUE_STATUSES, Order, OrderStatus
from storefront.settings.store_settings import find_store_settings
from storefront.shared.money import round_money
from storefront.support.message import Message

DEFAULT_LOW_STOCK_THRESHOLD = 10

_OPEN_ORDER_STATUSES = (OrderStatus.PENDING.value, OrderStatus.PROCESSING.value)


def _count(aggregate_cls, **filters) -> int:
    query = current_domain.repository_for(aggregate_cls)._dao.query
    if filters:
        query = query.filter(**filters)
    return query.all().total


def low_stock_products(threshold: int) -> list[Product]:
    """Active, inventory-tracked products with fewer than ``threshold`` units left."""
    query = current_domain.repository_for(Product)._dao.query.filter(
        status=ProductStatus.ACTIVE.value, track_inventory=True, stock_quantity__lt=threshold
    )
    return query.limit(None).all().items


def dashboard_stats() -> dict:
    settings = find_store_settings()
    threshold = settings.low_stock_threshold if settings is not None else DEFAULT_LOW_STOCK_THRESHOLD

    revenue_orders = current_domain.repository_for(Order).with_statuses(REVENUE_STATUSES)

    return {
        "total_products": _count(Product),
        "active_products": _count(Product, status=ProductStatus.ACTIVE.value),
        "total_orders": _count(Order),
        "pending_orders": _count(Order, status__in=list(_OPEN_ORDER_STATUSES)),
        "revenue": round_money(sum(o.total for o in revenue_orders)),
        "total_categories": _count(Category),
        "total_users": _count(User),
        "low_stock_products": len(low_stock_products(threshold)),
        "unread_messages": current_domain.repository_for(Message).count_unread(),
    }
