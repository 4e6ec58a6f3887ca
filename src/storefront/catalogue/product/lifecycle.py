"""Product lifecycle: status changes and deletion."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.events import ProductDeleted
from storefront.catalogue.product.product import Product, ProductStatus
from storefront.domain import storefront


@storefront.command(part_of="Product")
class ChangeProductStatus:
    product_id: Identifier(required=True)
    status: String(required=True, choices=ProductStatus)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ProductLifecycleHandler:
    @handle(ChangeProductStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_status(command.status)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.raise_(ProductDeleted(product_id=product.id, slug=product.slug))
        # Registers the event with the unit of work before the row goes away
        repo.add(product)
        repo._dao.delete(product)
