"""Customer directory for the back office.

Registered shoppers come from the user store; guests are grouped from orders
placed without an account, keyed by email.
"""

from dataclasses import dataclass, field
from datetime import datetime

from protean.utils.globals import current_domain

from storefront.identity.user.user import User
from storefront.orders.order import REVENUE_STATUSES, Order
from storefront.shared.money import round_money
from storefront.shared.text import normalize_email


@dataclass
class Customer:
    id: str
    email: str
    name: str | None
    phone: str | None
    is_registered: bool
    created_at: datetime | None
    orders: list[Order] = field(default_factory=list)

    @property
    def order_count(self) -> int:
        return len(self.orders)

    @property
    def total_spent(self) -> float:
        return round_money(sum(o.total for o in self.orders if o.status in REVENUE_STATUSES))

    @property
    def last_order_date(self) -> datetime | None:
        return max((o.created_at for o in self.orders), default=None)


def _registered(user: User, orders: list[Order]) -> Customer:
    return Customer(
        id=user.id,
        email=user.email,
        name=user.name,
        phone=user.phone,
        is_registered=True,
        created_at=user.created_at,
        orders=orders,
    )


def _guest(email: str, orders: list[Order]) -> Customer:
    latest = max(orders, key=lambda o: o.created_at)
    return Customer(
        id=email,
        email=email,
        name=latest.shipping_name,
        phone=latest.shipping_phone,
        is_registered=False,
        created_at=min(o.created_at for o in orders),
        orders=orders,
    )


def _matches(customer: Customer, term: str) -> bool:
    return term in customer.email.lower() or bool(customer.name and term in customer.name.lower())


def list_customers(search: str | None = None) -> list[Customer]:
    """Every non-admin user plus every guest email, most recent buyer first."""
    orders = current_domain.repository_for(Order).list_orders()

    by_user: dict[str, list[Order]] = {}
    by_guest_email: dict[str, list[Order]] = {}
    for order in orders:
        if order.user_id:
            by_user.setdefault(order.user_id, []).append(order)
        else:
            by_guest_email.setdefault(normalize_email(order.email), []).append(order)

    users = current_domain.repository_for(User).search(customers_only=True)
    customers = [_registered(u, by_user.get(u.id, [])) for u in users]
    customers += [_guest(email, guest_orders) for email, guest_orders in by_guest_email.items()]

    if search:
        term = search.strip().lower()
        customers = [c for c in customers if _matches(c, term)]

    customers.sort(key=lambda c: (c.last_order_date or datetime.min, c.total_spent), reverse=True)
    return customers


def find_customer(id_or_email: str) -> Customer | None:
    """A registered customer by id or email, else a guest by the email on their orders."""
    users = current_domain.repository_for(User)
    user = users.get_or_none(id_or_email) or users.find_by_email(id_or_email)
    order_repo = current_domain.repository_for(Order)

    if user is not None and not user.is_admin:
        return _registered(user, order_repo.for_user(user.id))

    guest_orders = [o for o in order_repo.for_email(id_or_email) if not o.user_id]
    if not guest_orders:
        return None
    return _guest(normalize_email(id_or_email), guest_orders)
