from storefront.identity.api.routes import account_router, admin_user_router, auth_router

__all__ = ["account_router", "admin_user_router", "auth_router"]
