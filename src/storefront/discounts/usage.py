"""Recording redemptions of discount codes."""

import structlog
from protean.utils.globals import current_domain

from storefront.discounts.discount_code import DiscountCode, DiscountUsage

logger = structlog.get_logger(__name__)


def record_discount_usage(discount_code_id, order_id, email, discount_amount, user_id=None) -> DiscountUsage:
    """Count one redemption against the code and keep the usage record."""
    repo = current_domain.repository_for(DiscountCode)
    discount = repo.get(discount_code_id)
    discount.record_usage()
    repo.add(discount)

    usage = DiscountUsage(
        discount_code_id=discount_code_id,
        order_id=order_id,
        user_id=user_id,
        email=email.lower(),
        discount_amount=discount_amount,
    )
    current_domain.repository_for(DiscountUsage).add(usage)
    logger.info("Discount code redeemed", code=discount.code, order_id=str(order_id), amount=discount_amount)
    return usage
