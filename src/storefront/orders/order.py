"""Order aggregate root with OrderItem and StatusChange entities.

Orders are created at checkout from a priced cart and never change their
lines afterwards. Status moves along a fixed transition map, driven by
admin actions and payment callbacks; every move is kept in the history.
"""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now
from storefront.shared.money import round_money


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentMethod(Enum):
    STRIPE = "stripe"
    PAYPAL = "paypal"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PAID, OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PAID: {OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.CANCELLED, OrderStatus.REFUNDED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED, OrderStatus.REFUNDED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED, OrderStatus.REFUNDED},
    OrderStatus.DELIVERED: {OrderStatus.REFUNDED},
    OrderStatus.CANCELLED: set(),  # Terminal
    OrderStatus.REFUNDED: set(),  # Terminal
}

# Statuses that count as fulfilled or beyond for tracking purposes
_SHIPPED_OR_BEYOND = {OrderStatus.SHIPPED, OrderStatus.DELIVERED}

# Closed orders never receive tracking
_NO_TRACKING = {OrderStatus.CANCELLED, OrderStatus.REFUNDED}

REVENUE_STATUSES = (
    OrderStatus.PAID.value,
    OrderStatus.PROCESSING.value,
    OrderStatus.SHIPPED.value,
    OrderStatus.DELIVERED.value,
)


@storefront.entity(part_of="Order")
class OrderItem:
    product_id: Identifier(required=True)
    variant_id: Identifier()
    product_name: String(required=True, max_length=255)
    variant_name: String(max_length=255)
    sku: String(max_length=100)
    price: Float(required=True, min_value=0.0)
    quantity: Integer(required=True, min_value=1)
    total: Float(required=True, min_value=0.0)


@storefront.entity(part_of="Order")
class StatusChange:
    from_status: String(max_length=20)
    to_status: String(required=True, max_length=20)
    note: Text()
    changed_by: Identifier()
    changed_at: DateTime(default=now)


@storefront.aggregate
class Order:
    order_number: String(required=True, max_length=50, unique=True)
    user_id: Identifier()
    email: String(required=True, max_length=254)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_method: String(required=True, choices=PaymentMethod)
    payment_status: String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)
    payment_intent_id: String(max_length=255)
    subtotal: Float(required=True, min_value=0.0)
    discount_amount: Float(default=0.0, min_value=0.0)
    shipping_cost: Float(default=0.0, min_value=0.0)
    tax: Float(default=0.0, min_value=0.0)
    total: Float(required=True, min_value=0.0)
    currency: String(default="SEK", max_length=3)
    discount_code: String(max_length=50)
    shipping_region_id: Identifier()
    shipping_name: String(required=True, max_length=200)
    shipping_address: String(required=True, max_length=255)
    shipping_address_line2: String(max_length=255)
    shipping_city: String(required=True, max_length=100)
    shipping_postal_code: String(required=True, max_length=20)
    shipping_country: String(required=True, max_length=2)
    shipping_phone: String(max_length=30)
    tracking_number: String(max_length=100)
    notes: Text()
    gift_message: String(max_length=500)
    items: HasMany(OrderItem)
    history: HasMany(StatusChange)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["Order must contain at least one item"]})

    @classmethod
    def place(cls, order_number, email, payment_method, lines, totals, shipping, **attributes):
        """Create an order from priced cart lines and checkout totals.

        ``lines`` are dicts with product/variant ids, names, sku, unit price
        and quantity; ``totals`` carries subtotal, discount, shipping, tax and
        total; ``shipping`` holds the ``shipping_*`` address fields.
        """
        from storefront.orders.events import OrderPlaced

        payment_status = attributes.pop("payment_status", PaymentStatus.PENDING.value)
        status = OrderStatus.PAID.value if payment_status == PaymentStatus.PAID.value else OrderStatus.PENDING.value
        timestamp = now()

        order = cls(
            order_number=order_number,
            email=email,
            payment_method=payment_method,
            payment_status=payment_status,
            status=status,
            subtotal=totals["subtotal"],
            discount_amount=totals["discount_amount"],
            shipping_cost=totals["shipping_cost"],
            tax=totals["tax"],
            total=totals["total"],
            items=[
                OrderItem(
                    product_id=line["product_id"],
                    variant_id=line.get("variant_id"),
                    product_name=line["product_name"],
                    variant_name=line.get("variant_name"),
                    sku=line.get("sku"),
                    price=line["unit_price"],
                    quantity=line["quantity"],
                    total=round_money(line["unit_price"] * line["quantity"]),
                )
                for line in lines
            ],
            history=[StatusChange(from_status=None, to_status=status, note="Order placed")],
            created_at=timestamp,
            updated_at=timestamp,
            **shipping,
            **attributes,
        )

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number,
                user_id=order.user_id,
                email=order.email,
                total=order.total,
                currency=order.currency,
                payment_method=order.payment_method,
                status=order.status,
                placed_at=timestamp,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------
    def can_transition_to(self, target_status):
        return OrderStatus(target_status) in _VALID_TRANSITIONS.get(OrderStatus(self.status), set())

    def _assert_can_transition(self, target_status):
        if not self.can_transition_to(target_status):
            raise ValidationError(
                {"status": [f"Cannot transition order from {self.status} to {OrderStatus(target_status).value}"]}
            )

    def change_status(self, new_status, note=None, changed_by=None):
        from storefront.orders.events import OrderStatusChanged

        new_status = OrderStatus(new_status).value
        self._assert_can_transition(new_status)

        previous = self.status
        self.status = new_status
        if new_status == OrderStatus.PAID.value:
            self.payment_status = PaymentStatus.PAID.value
        elif new_status == OrderStatus.REFUNDED.value:
            self.payment_status = PaymentStatus.REFUNDED.value

        self.add_history(StatusChange(from_status=previous, to_status=new_status, note=note, changed_by=changed_by))
        self.updated_at = now()

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                order_number=self.order_number,
                previous_status=previous,
                new_status=new_status,
                note=note,
            )
        )

    def set_tracking_number(self, tracking_number, changed_by=None):
        """Store tracking and move the order to shipped unless it already is (or is past it)."""
        from storefront.orders.events import OrderShipped

        if OrderStatus(self.status) in _NO_TRACKING:
            raise ValidationError({"tracking_number": [f"Cannot add tracking to a {self.status} order"]})

        self.tracking_number = tracking_number
        if OrderStatus(self.status) not in _SHIPPED_OR_BEYOND:
            self.change_status(
                OrderStatus.SHIPPED.value,
                note=f"Tracking number: {tracking_number}",
                changed_by=changed_by,
            )
        self.updated_at = now()

        self.raise_(
            OrderShipped(
                order_id=self.id,
                order_number=self.order_number,
                email=self.email,
                tracking_number=tracking_number,
                shipped_at=self.updated_at,
            )
        )

    # -------------------------------------------------------------------
    # Payment callbacks
    # -------------------------------------------------------------------
    def mark_paid(self):
        if self.payment_status == PaymentStatus.PAID.value:
            return
        if self.status == OrderStatus.PENDING.value:
            self.change_status(OrderStatus.PAID.value, note="Payment confirmed by provider")
        else:
            self.payment_status = PaymentStatus.PAID.value
            self.updated_at = now()

    def mark_payment_failed(self):
        if self.payment_status == PaymentStatus.PAID.value:
            return
        self.payment_status = PaymentStatus.FAILED.value
        self.updated_at = now()

    def sorted_history(self):
        return sorted(self.history, key=lambda change: change.changed_at)
