from storefront.shipping.api.routes import admin_shipping_router, shipping_router

__all__ = ["admin_shipping_router", "shipping_router"]
