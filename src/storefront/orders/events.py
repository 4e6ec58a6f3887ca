"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer completed checkout and an order was created."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    user_id: Identifier()
    email: String(required=True)
    total: Float(required=True)
    currency: String(default="SEK")
    payment_method: String(required=True)
    status: String(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    note: Text()


@storefront.event(part_of="Order")
class OrderShipped:
    """A tracking number was attached to the order."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_number: String(required=True)
    email: String(required=True)
    tracking_number: String(required=True)
    shipped_at: DateTime(required=True)
