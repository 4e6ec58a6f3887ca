"""Cart management: commands and handler.

Commands address the cart by owner (``user_id`` or ``session_id``); the cart
is created on first use.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.command(part_of="ShoppingCart")
class AddToCart:
    user_id: Identifier()
    session_id: String(max_length=255)
    product_id: Identifier(required=True)
    variant_id: Identifier()
    quantity: Integer(default=1, min_value=1)


@storefront.command(part_of="ShoppingCart")
class UpdateCartItem:
    user_id: Identifier()
    session_id: String(max_length=255)
    item_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=0)


@storefront.command(part_of="ShoppingCart")
class RemoveCartItem:
    user_id: Identifier()
    session_id: String(max_length=255)
    item_id: Identifier(required=True)


@storefront.command(part_of="ShoppingCart")
class ClearCart:
    user_id: Identifier()
    session_id: String(max_length=255)


@storefront.command(part_of="ShoppingCart")
class MergeGuestCart:
    user_id: Identifier(required=True)
    session_id: String(required=True, max_length=255)


def _require_owner(command):
    if not command.user_id and not command.session_id:
        raise ValidationError({"session": ["Session required"]})


def _existing_cart(repo, command):
    _require_owner(command)
    cart = repo.find_for_owner(user_id=command.user_id, session_id=command.session_id)
    if cart is None:
        raise ValidationError({"cart": ["Cart not found"]})
    return cart


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        _require_owner(command)

        try:
            product = current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ValidationError({"product_id": ["Product not found"]})
        if not product.is_active:
            raise ValidationError({"product_id": ["Product is not available"]})
        if command.variant_id and product.get_variant(command.variant_id) is None:
            raise ValidationError({"variant_id": ["Variant does not belong to this product"]})

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.find_for_owner(user_id=command.user_id, session_id=command.session_id)
        if cart is None:
            cart = ShoppingCart.create(user_id=command.user_id, session_id=command.session_id)

        item = cart.add_item(command.product_id, command.quantity, variant_id=command.variant_id)
        repo.add(cart)
        return str(item.id)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = _existing_cart(repo, command)
        cart.update_quantity(command.item_id, command.quantity)
        repo.add(cart)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = _existing_cart(repo, command)
        cart.remove_item(command.item_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        _require_owner(command)
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.find_for_owner(user_id=command.user_id, session_id=command.session_id)
        if cart is None:
            return
        cart.clear()
        repo.add(cart)

    @handle(MergeGuestCart)
    def merge_guest_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        guest_cart = repo.find_for_session(command.session_id)
        if guest_cart is None or guest_cart.user_id:
            return

        user_cart = repo.find_for_user(command.user_id)
        if user_cart is None:
            # Adopt the guest cart as-is
            guest_cart.user_id = command.user_id
            guest_cart.session_id = None
            repo.add(guest_cart)
            return

        user_cart.absorb(guest_cart)
        repo.add(user_cart)
        repo._dao.delete(guest_cart)
