from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront


@storefront.repository(part_of=ShoppingCart)
class ShoppingCartRepository:
    def find_for_user(self, user_id: str) -> ShoppingCart | None:
        return self._dao.query.filter(user_id=str(user_id)).all().first

    def find_for_session(self, session_id: str) -> ShoppingCart | None:
        return self._dao.query.filter(session_id=session_id).all().first

    def find_for_owner(self, user_id: str | None = None, session_id: str | None = None) -> ShoppingCart | None:
        if user_id:
            return self.find_for_user(user_id)
        if session_id:
            return self.find_for_session(session_id)
        return None
