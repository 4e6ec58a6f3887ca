from storefront.settings.api.routes import settings_router

__all__ = ["settings_router"]
