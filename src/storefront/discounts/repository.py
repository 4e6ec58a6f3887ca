"""Repositories for discount codes and their usages."""

from protean.utils.query import Q

from storefront.discounts.discount_code import DiscountCode, DiscountUsage
from storefront.domain import storefront


@storefront.repository(part_of=DiscountCode)
class DiscountCodeRepository:
    def find_by_code(self, code: str) -> DiscountCode | None:
        return self._dao.query.filter(code=code.strip().upper()).all().first

    def list_codes(self) -> list[DiscountCode]:
        return self._dao.query.order_by("-created_at").limit(None).all().items


@storefront.repository(part_of=DiscountUsage)
class DiscountUsageRepository:
    def count_for_customer(self, discount_code_id: str, user_id: str | None, email: str | None) -> int:
        """Usages of a code by the same user id or the same email."""
        if not user_id and not email:
            return 0

        customer = Q()
        if user_id:
            customer = customer | Q(user_id=str(user_id))
        if email:
            customer = customer | Q(email__iexact=email)

        return self._dao.query.filter(customer, discount_code_id=str(discount_code_id)).all().total
