"""Discount code validation at checkout."""

from dataclasses import dataclass
from datetime import datetime

from protean.utils.globals import current_domain

from storefront.discounts.discount_code import DiscountCode, DiscountUsage
from storefront.shared.clock import now as current_time
from storefront.shared.money import format_money


@dataclass(frozen=True)
class DiscountValidation:
    valid: bool
    discount_code: DiscountCode | None = None
    error: str | None = None


def validate_discount_code(
    code: str,
    subtotal: float,
    user_id: str | None = None,
    email: str | None = None,
    now: datetime | None = None,
    currency: str = "SEK",
) -> DiscountValidation:
    """Check a code against the cart subtotal and the customer's history.

    Checks run in a fixed order and the first failure wins: existence,
    active flag, validity window, minimum purchase, global usage limit,
    per-customer usage limit.
    """
    now = now or current_time()
    discount = current_domain.repository_for(DiscountCode).find_by_code(code or "")

    if discount is None:
        return DiscountValidation(False, error="Discount code not found")
    if not discount.active:
        return DiscountValidation(False, discount, "Discount code is inactive")
    if discount.valid_from and now < discount.valid_from:
        return DiscountValidation(False, discount, "Discount code is not yet valid")
    if discount.valid_until and now > discount.valid_until:
        return DiscountValidation(False, discount, "Discount code has expired")
    if discount.minimum_purchase and subtotal < discount.minimum_purchase:
        return DiscountValidation(
            False,
            discount,
            f"Minimum purchase of {format_money(discount.minimum_purchase, currency)} required",
        )
    if discount.usage_limit is not None and (discount.usage_count or 0) >= discount.usage_limit:
        return DiscountValidation(False, discount, "Discount code has reached its usage limit")

    if user_id or email:
        used = current_domain.repository_for(DiscountUsage).count_for_customer(discount.id, user_id, email)
        if used >= (discount.user_usage_limit or 1):
            return DiscountValidation(False, discount, "You have already used this discount code")

    return DiscountValidation(True, discount)


def calculate_discount_amount(discount: DiscountCode | None, subtotal: float) -> float:
    if discount is None:
        return 0.0
    return discount.calculate_discount(subtotal)
