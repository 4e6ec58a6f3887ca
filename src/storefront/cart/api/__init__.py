from storefront.cart.api.routes import CartOwner, cart_owner, cart_router

__all__ = ["CartOwner", "cart_owner", "cart_router"]
