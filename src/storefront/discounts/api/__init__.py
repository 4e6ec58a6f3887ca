from storefront.discounts.api.routes import admin_discount_router

__all__ = ["admin_discount_router"]
