"""Wishlist: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.wishlist.wishlist_item import WishlistItem


@storefront.command(part_of="WishlistItem")
class AddToWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command(part_of="WishlistItem")
class RemoveFromWishlist:
    user_id: Identifier(required=True)
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=WishlistItem)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"product_id": ["Product not found"]})

        repo = current_domain.repository_for(WishlistItem)
        existing = repo.find_entry(command.user_id, command.product_id)
        if existing is not None:
            return str(existing.id)

        item = WishlistItem(user_id=command.user_id, product_id=command.product_id)
        repo.add(item)
        return str(item.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        item = repo.find_entry(command.user_id, command.product_id)
        if item is not None:
            repo._dao.delete(item)
