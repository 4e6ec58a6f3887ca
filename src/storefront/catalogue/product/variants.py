"""Variant management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddVariant:
    product_id: Identifier(required=True)
    name_en: String(max_length=200)
    name_sv: String(max_length=200)
    sku: String(max_length=100)
    price: Float(min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    stock_quantity: Integer(default=0, min_value=0)
    track_inventory: Boolean(default=True)
    option1_name: String(max_length=100)
    option1_value: String(max_length=100)
    option2_name: String(max_length=100)
    option2_value: String(max_length=100)
    option3_name: String(max_length=100)
    option3_value: String(max_length=100)


@storefront.command(part_of="Product")
class UpdateVariant:
    product_id: Identifier(required=True)
    variant_id: Identifier(required=True)
    name_en: String(max_length=200)
    name_sv: String(max_length=200)
    sku: String(max_length=100)
    price: Float(min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    stock_quantity: Integer(min_value=0)
    track_inventory: Boolean()
    option1_name: String(max_length=100)
    option1_value: String(max_length=100)
    option2_name: String(max_length=100)
    option2_value: String(max_length=100)
    option3_name: String(max_length=100)
    option3_value: String(max_length=100)


@storefront.command(part_of="Product")
class RemoveVariant:
    product_id: Identifier(required=True)
    variant_id: Identifier(required=True)


def _variant_fields(command):
    payload = command.to_dict()
    payload.pop("product_id", None)
    payload.pop("variant_id", None)
    return payload


@storefront.command_handler(part_of=Product)
class ManageVariantsHandler:
    @handle(AddVariant)
    def add_variant(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        variant = product.add_variant(**_variant_fields(command))
        repo.add(product)
        return str(variant.id)

    @handle(UpdateVariant)
    def update_variant(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_variant(command.variant_id, **_variant_fields(command))
        repo.add(product)

    @handle(RemoveVariant)
    def remove_variant(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.remove_variant(command.variant_id)
        repo.add(product)
