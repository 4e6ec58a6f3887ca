"""DiscountCode and DiscountUsage aggregates."""

from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now
from storefront.shared.money import round_money


class DiscountType(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@storefront.aggregate
class DiscountCode:
    """A redeemable promotion code.

    Codes are stored uppercase and matched case-insensitively. ``usage_limit``
    caps redemptions across all customers; ``user_usage_limit`` caps them per
    customer (identified by user id or email).
    """

    code: String(required=True, max_length=50, unique=True)
    description: Text()
    discount_type: String(required=True, choices=DiscountType)
    discount_value: Float(required=True, min_value=0.0)
    minimum_purchase: Float(default=0.0, min_value=0.0)
    maximum_discount: Float(min_value=0.0)
    usage_limit: Integer(min_value=1)
    usage_count: Integer(default=0, min_value=0)
    user_usage_limit: Integer(default=1, min_value=1)
    valid_from: DateTime()
    valid_until: DateTime()
    active: Boolean(default=True)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @invariant.post
    def percentage_cannot_exceed_hundred(self):
        if self.discount_type == DiscountType.PERCENTAGE.value and self.discount_value > 100:
            raise ValidationError({"discount_value": ["Percentage discount cannot exceed 100%"]})

    @invariant.post
    def validity_window_must_be_ordered(self):
        if self.valid_from and self.valid_until and self.valid_until <= self.valid_from:
            raise ValidationError({"valid_until": ["End date must be after start date"]})

    @invariant.post
    def code_must_be_uppercase(self):
        if self.code != self.code.upper():
            raise ValidationError({"code": ["Discount code must be uppercase"]})

    @classmethod
    def create(cls, code, discount_type, discount_value, **attributes):
        timestamp = now()
        return cls(
            code=code.strip().upper(),
            discount_type=discount_type,
            discount_value=discount_value,
            created_at=timestamp,
            updated_at=timestamp,
            **{k: v for k, v in attributes.items() if v is not None},
        )

    def update(self, clear_fields=(), **changes):
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value.strip().upper() if field == "code" else value)
        for field in clear_fields:
            setattr(self, field, None)
        self.updated_at = now()

    def calculate_discount(self, subtotal):
        """Discount for a subtotal: percentage capped by ``maximum_discount``, fixed capped by the subtotal."""
        if self.discount_type == DiscountType.PERCENTAGE.value:
            amount = subtotal * self.discount_value / 100
            if self.maximum_discount is not None:
                amount = min(amount, self.maximum_discount)
        else:
            amount = min(self.discount_value, subtotal)
        return round_money(max(amount, 0.0))

    def record_usage(self):
        self.usage_count = (self.usage_count or 0) + 1
        self.updated_at = now()


@storefront.aggregate
class DiscountUsage:
    """One redemption of a discount code on an order."""

    discount_code_id: Identifier(required=True)
    order_id: Identifier(required=True)
    user_id: Identifier()
    email: String(required=True, max_length=254)
    discount_amount: Float(required=True, min_value=0.0)
    created_at: DateTime(default=now)
