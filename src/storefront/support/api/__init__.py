from storefront.support.api.routes import admin_message_router, contact_router

__all__ = ["admin_message_router", "contact_router"]
