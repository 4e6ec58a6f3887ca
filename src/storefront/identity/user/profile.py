"""Profile and role management: commands and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.user.user import User


@storefront.command(part_of="User")
class UpdateProfile:
    user_id: Identifier(required=True)
    name: String(max_length=200)
    phone: String(max_length=30)


@storefront.command(part_of="User")
class SetAdminRole:
    user_id: Identifier(required=True)
    is_admin: Boolean(required=True)
    acting_user_id: Identifier()


@storefront.command(part_of="User")
class DeleteUser:
    user_id: Identifier(required=True)
    acting_user_id: Identifier()


@storefront.command_handler(part_of=User)
class ManageUserHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.update_profile(name=command.name, phone=command.phone)
        repo.add(user)

    @handle(SetAdminRole)
    def set_admin_role(self, command):
        if command.acting_user_id and str(command.acting_user_id) == str(command.user_id) and not command.is_admin:
            raise ValidationError({"is_admin": ["You cannot remove your own admin role"]})

        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.set_admin(command.is_admin)
        repo.add(user)

    @handle(DeleteUser)
    def delete_user(self, command):
        if command.acting_user_id and str(command.acting_user_id) == str(command.user_id):
            raise ValidationError({"user_id": ["You cannot delete your own account"]})

        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        repo._dao.delete(user)
