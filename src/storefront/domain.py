"""Storefront domain composition root.

A single Protean domain holds every area of the shop: catalogue, identity,
store settings, shipping, discounts, cart, checkout, orders, payments,
reviews, wishlist, support messages and notifications.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="storefront")

logger = get_logger(__name__)

storefront = Domain(name="storefront")
