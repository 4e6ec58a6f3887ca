"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.identity.user.user import User
from storefront.shared.text import normalize_email


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=normalize_email(email)).all().first

    def find_by_verification_token(self, token: str) -> User | None:
        return self._dao.query.filter(verification_token=token).all().first

    def find_by_reset_token(self, token: str) -> User | None:
        return self._dao.query.filter(password_reset_token=token).all().first

    def search(self, term: str | None = None, customers_only: bool = False) -> list[User]:
        query = self._dao.query.filter(is_admin=False) if customers_only else self._dao.query
        users = query.order_by("-created_at").limit(None).all().items
        if term:
            term = term.lower()
            users = [u for u in users if term in u.email or (u.name and term in u.name.lower())]
        return users
