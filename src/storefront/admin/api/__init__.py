from storefront.admin.api.routes import admin_router

__all__ = ["admin_router"]
