"""Shopping cart aggregate.

A cart belongs either to a logged-in user (``user_id``) or to an anonymous
browser session (``session_id``). Guest carts are folded into the user's
cart at login.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.shared.clock import now


@storefront.entity(part_of="ShoppingCart")
class CartItem:
    product_id: Identifier(required=True)
    variant_id: Identifier()
    quantity: Integer(required=True, min_value=1)
    added_at: DateTime(default=now)


@storefront.aggregate
class ShoppingCart:
    user_id: Identifier()
    session_id: String(max_length=255)
    items: HasMany(CartItem)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @invariant.post
    def cart_must_have_an_owner(self):
        if not self.user_id and not self.session_id:
            raise ValidationError({"cart": ["A cart needs a user or a session"]})

    @classmethod
    def create(cls, user_id=None, session_id=None):
        timestamp = now()
        return cls(
            user_id=user_id,
            session_id=None if user_id else session_id,
            created_at=timestamp,
            updated_at=timestamp,
        )

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)

    def find_line(self, product_id, variant_id=None):
        return next(
            (
                i
                for i in self.items
                if str(i.product_id) == str(product_id) and str(i.variant_id or "") == str(variant_id or "")
            ),
            None,
        )

    def _get_item(self, item_id):
        item = next((i for i in self.items if str(i.id) == str(item_id)), None)
        if item is None:
            raise ValidationError({"item_id": ["Item not found in cart"]})
        return item

    def add_item(self, product_id, quantity, variant_id=None):
        """Add a line, or increase the quantity of the line for the same product and variant."""
        existing = self.find_line(product_id, variant_id)
        if existing is not None:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(product_id=product_id, variant_id=variant_id, quantity=quantity)
            self.add_items(item)

        self.updated_at = now()
        return item

    def update_quantity(self, item_id, quantity):
        item = self._get_item(item_id)
        if quantity <= 0:
            self.remove_items(item)
        else:
            item.quantity = quantity
        self.updated_at = now()

    def remove_item(self, item_id):
        self.remove_items(self._get_item(item_id))
        self.updated_at = now()

    def clear(self):
        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
        self.updated_at = now()

    def absorb(self, other):
        """Move every line of ``other`` into this cart, merging quantities."""
        with atomic_change(self):
            for item in other.items:
                self.add_item(item.product_id, item.quantity, variant_id=item.variant_id)
        self.updated_at = now()
