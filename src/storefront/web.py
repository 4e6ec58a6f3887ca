"""FastAPI application factory.

Importing this module imports every router, and through them every command
module, so it must happen before ``storefront.init()``.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ConfigurationError
from protean.integrations.fastapi import register_exception_handlers

from storefront.admin.api import admin_router
from storefront.cart.api import cart_router
from storefront.catalogue.api import (
    admin_category_router,
    admin_product_router,
    category_router,
    product_router,
)
from storefront.checkout.api import checkout_router
from storefront.discounts.api import admin_discount_router
from storefront.domain import storefront
from storefront.identity.api import account_router, admin_user_router, auth_router
from storefront.orders.api import admin_order_router, order_router
from storefront.payments.api import payment_router
from storefront.reviews.api import admin_review_router, review_router
from storefront.settings.api import settings_router
from storefront.shipping.api import admin_shipping_router, shipping_router
from storefront.support.api import admin_message_router, contact_router
from storefront.utils.logging import get_logger
from storefront.wishlist.api import wishlist_router

logger = get_logger(__name__)

SHOPPER_ROUTERS = (
    auth_router,
    account_router,
    product_router,
    review_router,
    category_router,
    cart_router,
    checkout_router,
    order_router,
    wishlist_router,
    shipping_router,
    contact_router,
    payment_router,
)

BACK_OFFICE_ROUTERS = (
    admin_router,
    admin_product_router,
    admin_category_router,
    admin_discount_router,
    admin_order_router,
    admin_review_router,
    admin_user_router,
    admin_message_router,
    admin_shipping_router,
    settings_router,
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalogue, cart, checkout, orders and back office for the shop",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Service misconfigured", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        with storefront.domain_context():
            response = await call_next(request)
        return response

    for router in SHOPPER_ROUTERS + BACK_OFFICE_ROUTERS:
        app.include_router(router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
