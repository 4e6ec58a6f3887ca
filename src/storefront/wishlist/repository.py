from storefront.domain import storefront
from storefront.wishlist.wishlist_item import WishlistItem


@storefront.repository(part_of=WishlistItem)
class WishlistItemRepository:
    def find_entry(self, user_id: str, product_id: str) -> WishlistItem | None:
        return self._dao.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first

    def for_user(self, user_id: str) -> list[WishlistItem]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").limit(None).all().items

    def for_product(self, product_id: str) -> list[WishlistItem]:
        return self._dao.query.filter(product_id=str(product_id)).limit(None).all().items
