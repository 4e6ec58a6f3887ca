"""Shipping region management: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, List, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.shipping.region import ShippingRegion


@storefront.command(part_of="ShippingRegion")
class CreateShippingRegion:
    name_en: String(required=True, max_length=100)
    name_sv: String(required=True, max_length=100)
    code: String(required=True, max_length=20)
    base_price: Float(required=True, min_value=0.0)
    free_shipping_threshold: Float(min_value=0.0)
    countries: List(content_type=String, required=True)
    active: Boolean(default=True)


@storefront.command(part_of="ShippingRegion")
class UpdateShippingRegion:
    region_id: Identifier(required=True)
    name_en: String(max_length=100)
    name_sv: String(max_length=100)
    code: String(max_length=20)
    base_price: Float(min_value=0.0)
    free_shipping_threshold: Float(min_value=0.0)
    clear_free_shipping_threshold: Boolean(default=False)
    countries: List(content_type=String)
    active: Boolean()


@storefront.command(part_of="ShippingRegion")
class DeleteShippingRegion:
    region_id: Identifier(required=True)


@storefront.command_handler(part_of=ShippingRegion)
class ManageShippingRegionHandler:
    @handle(CreateShippingRegion)
    def create_region(self, command):
        repo = current_domain.repository_for(ShippingRegion)
        if repo.find_by_code(command.code) is not None:
            raise ValidationError({"code": ["A shipping region with this code already exists"]})
        if not command.countries:
            raise ValidationError({"countries": ["At least one country is required"]})

        region = ShippingRegion.create(
            name_en=command.name_en,
            name_sv=command.name_sv,
            code=command.code,
            base_price=command.base_price,
            free_shipping_threshold=command.free_shipping_threshold,
            countries=command.countries,
            active=command.active,
        )
        repo.add(region)
        return str(region.id)

    @handle(UpdateShippingRegion)
    def update_region(self, command):
        repo = current_domain.repository_for(ShippingRegion)
        region = repo.get(command.region_id)

        if command.code and command.code.strip().upper() != region.code:
            if repo.find_by_code(command.code) is not None:
                raise ValidationError({"code": ["A shipping region with this code already exists"]})

        region.update(
            countries=command.countries or None,
            clear_free_shipping_threshold=command.clear_free_shipping_threshold,
            name_en=command.name_en,
            name_sv=command.name_sv,
            code=command.code,
            base_price=command.base_price,
            free_shipping_threshold=command.free_shipping_threshold,
            active=command.active,
        )
        repo.add(region)

    @handle(DeleteShippingRegion)
    def delete_region(self, command):
        repo = current_domain.repository_for(ShippingRegion)
        region = repo.get(command.region_id)
        repo._dao.delete(region)
