from protean.fields import DateTime, Identifier

from storefront.domain import storefront
from storefront.shared.clock import now


@storefront.aggregate
class WishlistItem:
    """A product a user has saved for later. One per user and product."""

    user_id: Identifier(required=True)
    product_id: Identifier(required=True)
    created_at: DateTime(default=now)
