"""Drops saved products from wishlists when they leave the catalogue."""

import structlog
from protean import handle
from protean.utils.globals import current_domain

from storefront.catalogue.product.events import ProductDeleted
from storefront.domain import storefront
from storefront.wishlist.wishlist_item import WishlistItem

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=WishlistItem, stream_category="storefront::product")
class CatalogueEventsHandler:
    @handle(ProductDeleted)
    def on_product_deleted(self, event: ProductDeleted) -> None:
        repo = current_domain.repository_for(WishlistItem)
        items = repo.for_product(event.product_id)
        for item in items:
            repo._dao.delete(item)
        if items:
            logger.info("Wishlist entries removed", product_id=str(event.product_id), count=len(items))
