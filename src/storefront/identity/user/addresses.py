"""Saved address management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.user import User


@storefront.command(part_of="User")
class AddAddress:
    user_id: Identifier(required=True)
    label: String(max_length=50)
    name: String(required=True, max_length=200)
    address_line1: String(required=True, max_length=255)
    address_line2: String(max_length=255)
    city: String(required=True, max_length=100)
    postal_code: String(required=True, max_length=20)
    country: String(required=True, max_length=2)
    phone: String(max_length=30)
    is_default: Boolean(default=False)


@storefront.command(part_of="User")
class UpdateAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)
    label: String(max_length=50)
    name: String(max_length=200)
    address_line1: String(max_length=255)
    address_line2: String(max_length=255)
    city: String(max_length=100)
    postal_code: String(max_length=20)
    country: String(max_length=2)
    phone: String(max_length=30)
    is_default: Boolean()


@storefront.command(part_of="User")
class RemoveAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.command(part_of="User")
class SetDefaultAddress:
    user_id: Identifier(required=True)
    address_id: Identifier(required=True)


@storefront.command_handler(part_of=User)
class ManageAddressesHandler:
    @handle(AddAddress)
    def add_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        address = user.add_address(
            is_default=command.is_default,
            label=command.label,
            name=command.name,
            address_line1=command.address_line1,
            address_line2=command.address_line2,
            city=command.city,
            postal_code=command.postal_code,
            country=command.country.upper(),
            phone=command.phone,
        )
        repo.add(user)
        return str(address.id)

    @handle(UpdateAddress)
    def update_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_address(
            command.address_id,
            is_default=command.is_default,
            label=command.label,
            name=command.name,
            address_line1=command.address_line1,
            address_line2=command.address_line2,
            city=command.city,
            postal_code=command.postal_code,
            country=command.country.upper() if command.country else None,
            phone=command.phone,
        )
        repo.add(user)

    @handle(RemoveAddress)
    def remove_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_address(command.address_id)
        repo.add(user)

    @handle(SetDefaultAddress)
    def set_default_address(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.set_default_address(command.address_id)
        repo.add(user)
