"""Product image management: commands and handler."""

from protean import handle
from protean.fields import Identifier, List, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddProductImage:
    product_id: Identifier(required=True)
    url: String(required=True, max_length=500)
    variant_id: Identifier()
    alt_text_en: String(max_length=255)
    alt_text_sv: String(max_length=255)


@storefront.command(part_of="Product")
class RemoveProductImage:
    product_id: Identifier(required=True)
    image_id: Identifier(required=True)


@storefront.command(part_of="Product")
class ReorderProductImages:
    product_id: Identifier(required=True)
    image_ids: List(content_type=String, required=True)


@storefront.command_handler(part_of=Product)
class ManageImagesHandler:
    @handle(AddProductImage)
    def add_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        image = product.add_image(
            url=command.url,
            alt_text_en=command.alt_text_en,
            alt_text_sv=command.alt_text_sv,
            variant_id=command.variant_id,
        )
        repo.add(product)
        return str(image.id)

    @handle(RemoveProductImage)
    def remove_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.remove_image(command.image_id)
        repo.add(product)

    @handle(ReorderProductImages)
    def reorder_images(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.reorder_images(command.image_ids)
        repo.add(product)
