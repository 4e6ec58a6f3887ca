"""Discount code management: commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, List, String, Text
from protean.utils.globals import current_domain

from storefront.discounts.discount_code import DiscountCode, DiscountType
from storefront.domain import storefront
from storefront.shared.clock import as_naive


@storefront.command(part_of="DiscountCode")
class CreateDiscountCode:
    code: String(required=True, min_length=1, max_length=50)
    description: Text()
    discount_type: String(required=True, choices=DiscountType)
    discount_value: Float(required=True, min_value=0.0)
    minimum_purchase: Float(min_value=0.0)
    maximum_discount: Float(min_value=0.0)
    usage_limit: Integer(min_value=1)
    user_usage_limit: Integer(min_value=1)
    valid_from: DateTime()
    valid_until: DateTime()
    active: Boolean(default=True)


@storefront.command(part_of="DiscountCode")
class UpdateDiscountCode:
    discount_code_id: Identifier(required=True)
    code: String(min_length=1, max_length=50)
    description: Text()
    discount_type: String(choices=DiscountType)
    discount_value: Float(min_value=0.0)
    minimum_purchase: Float(min_value=0.0)
    maximum_discount: Float(min_value=0.0)
    usage_limit: Integer(min_value=1)
    user_usage_limit: Integer(min_value=1)
    valid_from: DateTime()
    valid_until: DateTime()
    active: Boolean()
    clear_fields: List(content_type=String)


@storefront.command(part_of="DiscountCode")
class DeleteDiscountCode:
    discount_code_id: Identifier(required=True)


_CLEARABLE = {"description", "maximum_discount", "usage_limit", "valid_from", "valid_until"}


@storefront.command_handler(part_of=DiscountCode)
class ManageDiscountCodeHandler:
    @handle(CreateDiscountCode)
    def create_code(self, command):
        repo = current_domain.repository_for(DiscountCode)
        if repo.find_by_code(command.code) is not None:
            raise ValidationError({"code": ["A discount code with this code already exists"]})

        discount = DiscountCode.create(
            code=command.code,
            discount_type=command.discount_type,
            discount_value=command.discount_value,
            description=command.description,
            minimum_purchase=command.minimum_purchase,
            maximum_discount=command.maximum_discount,
            usage_limit=command.usage_limit,
            user_usage_limit=command.user_usage_limit,
            valid_from=as_naive(command.valid_from),
            valid_until=as_naive(command.valid_until),
            active=command.active,
        )
        repo.add(discount)
        return str(discount.id)

    @handle(UpdateDiscountCode)
    def update_code(self, command):
        repo = current_domain.repository_for(DiscountCode)
        discount = repo.get(command.discount_code_id)

        if command.code and command.code.strip().upper() != discount.code:
            if repo.find_by_code(command.code) is not None:
                raise ValidationError({"code": ["A discount code with this code already exists"]})

        unknown = set(command.clear_fields or []) - _CLEARABLE
        if unknown:
            raise ValidationError({"clear_fields": [f"Cannot clear: {', '.join(sorted(unknown))}"]})

        discount.update(
            clear_fields=command.clear_fields or (),
            code=command.code,
            description=command.description,
            discount_type=command.discount_type,
            discount_value=command.discount_value,
            minimum_purchase=command.minimum_purchase,
            maximum_discount=command.maximum_discount,
            usage_limit=command.usage_limit,
            user_usage_limit=command.user_usage_limit,
            valid_from=as_naive(command.valid_from),
            valid_until=as_naive(command.valid_until),
            active=command.active,
        )
        repo.add(discount)

    @handle(DeleteDiscountCode)
    def delete_code(self, command):
        repo = current_domain.repository_for(DiscountCode)
        discount = repo.get(command.discount_code_id)
        repo._dao.delete(discount)
