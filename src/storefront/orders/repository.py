from storefront.domain import storefront
from storefront.orders.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def find_by_order_number(self, order_number: str) -> Order | None:
        return self._dao.query.filter(order_number=order_number).all().first

    def find_by_payment_intent(self, payment_intent_id: str) -> Order | None:
        return self._dao.query.filter(payment_intent_id=payment_intent_id).all().first

    def for_user(self, user_id: str) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").limit(None).all().items

    def for_email(self, email: str) -> list[Order]:
        return self._dao.query.filter(email__iexact=email).order_by("-created_at").limit(None).all().items

    def list_orders(self, status: str | None = None) -> list[Order]:
        query = self._dao.query
        if status:
            query = query.filter(status=status)
        return query.order_by("-created_at").limit(None).all().items

    def with_statuses(self, statuses) -> list[Order]:
        return self._dao.query.filter(status__in=list(statuses)).limit(None).all().items
