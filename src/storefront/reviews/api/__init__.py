from storefront.reviews.api.routes import admin_review_router, review_router

__all__ = ["admin_review_router", "review_router"]
