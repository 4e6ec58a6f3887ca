"""Bulk product actions for the back office.

Bulk delete archives rather than removes, so order history and reviews keep
their product. Ids that no longer exist are skipped.
"""

from enum import Enum

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, List, String
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product, ProductStatus
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class BulkAction(Enum):
    DELETE = "delete"
    STATUS = "status"
    CATEGORY = "category"
    FEATURED = "featured"


@storefront.command(part_of="Product")
class BulkUpdateProducts:
    product_ids: List(content_type=String, required=True)
    action: String(required=True, choices=BulkAction)
    status: String(choices=ProductStatus)
    category_id: Identifier()
    featured: Boolean()


@storefront.command_handler(part_of=Product)
class BulkProductHandler:
    @handle(BulkUpdateProducts)
    def bulk_update(self, command) -> int:
        """Apply one action to every listed product and return how many were updated."""
        if not command.product_ids:
            raise ValidationError({"product_ids": ["At least one product must be selected"]})

        action = BulkAction(command.action)
        if action == BulkAction.STATUS and not command.status:
            raise ValidationError({"status": ["Status value is required"]})
        if action == BulkAction.FEATURED and command.featured is None:
            raise ValidationError({"featured": ["Featured value must be a boolean"]})
        if action == BulkAction.CATEGORY and command.category_id:
            current_domain.repository_for(Category).get(command.category_id)

        repo = current_domain.repository_for(Product)
        updated = 0
        for product_id in dict.fromkeys(command.product_ids):
            product = repo.get_or_none(product_id)
            if product is None:
                continue

            if action == BulkAction.DELETE:
                product.change_status(ProductStatus.ARCHIVED.value)
            elif action == BulkAction.STATUS:
                product.change_status(command.status)
            elif action == BulkAction.CATEGORY:
                product.assign_category(command.category_id)
            else:
                product.update_details(featured=command.featured)

            repo.add(product)
            updated += 1

        logger.info("Bulk product update", action=action.value, requested=len(command.product_ids), updated=updated)
        return updated
