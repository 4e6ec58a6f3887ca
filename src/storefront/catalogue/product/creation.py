"""Product creation: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.shared.text import slugify


@storefront.command(part_of="Product")
class CreateProduct:
    name_en: String(required=True, max_length=255)
    name_sv: String(required=True, max_length=255)
    slug: String(max_length=255)
    description_en: Text()
    description_sv: Text()
    instructions_en: Text()
    instructions_sv: Text()
    category_id: Identifier()
    price: Float(required=True, min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    sku: String(max_length=100)
    status: String(max_length=20)
    featured: Boolean(default=False)
    stock_quantity: Integer(default=0, min_value=0)
    track_inventory: Boolean(default=True)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)

        slug = command.slug or slugify(command.name_en)
        if repo.find_by_slug(slug) is not None:
            raise ValidationError({"slug": ["A product with this slug already exists"]})

        if command.category_id:
            current_domain.repository_for(Category).get(command.category_id)

        product = Product.create(
            name_en=command.name_en,
            name_sv=command.name_sv,
            slug=slug,
            description_en=command.description_en,
            description_sv=command.description_sv,
            instructions_en=command.instructions_en,
            instructions_sv=command.instructions_sv,
            category_id=command.category_id,
            price=command.price,
            compare_at_price=command.compare_at_price,
            sku=command.sku,
            status=command.status,
            featured=command.featured,
            stock_quantity=command.stock_quantity,
            track_inventory=command.track_inventory,
        )
        repo.add(product)
        return str(product.id)
