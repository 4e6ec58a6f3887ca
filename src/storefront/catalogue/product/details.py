"""Product detail updates: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name_en: String(max_length=255)
    name_sv: String(max_length=255)
    slug: String(max_length=255)
    description_en: Text()
    description_sv: Text()
    instructions_en: Text()
    instructions_sv: Text()
    category_id: Identifier()
    price: Float(min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    sku: String(max_length=100)
    featured: Boolean()
    stock_quantity: Integer(min_value=0)
    track_inventory: Boolean()


@storefront.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if command.slug and command.slug != product.slug:
            if repo.find_by_slug(command.slug) is not None:
                raise ValidationError({"slug": ["A product with this slug already exists"]})

        if command.category_id:
            current_domain.repository_for(Category).get(command.category_id)

        product.update_details(
            name_en=command.name_en,
            name_sv=command.name_sv,
            slug=command.slug,
            description_en=command.description_en,
            description_sv=command.description_sv,
            instructions_en=command.instructions_en,
            instructions_sv=command.instructions_sv,
            category_id=command.category_id,
            price=command.price,
            compare_at_price=command.compare_at_price,
            sku=command.sku,
            featured=command.featured,
            stock_quantity=command.stock_quantity,
            track_inventory=command.track_inventory,
        )
        repo.add(product)
