from storefront.domain import storefront
from storefront.reviews.review import Review, ReviewStatus


@storefront.repository(part_of=Review)
class ReviewRepository:
    def approved_for_product(self, product_id: str) -> list[Review]:
        query = self._dao.query.filter(product_id=str(product_id), status=ReviewStatus.APPROVED.value)
        return query.order_by("-created_at").limit(None).all().items

    def find_by_user_and_product(self, user_id: str, product_id: str) -> Review | None:
        return self._dao.query.filter(user_id=str(user_id), product_id=str(product_id)).all().first

    def list_reviews(self, status: str | None = None) -> list[Review]:
        query = self._dao.query
        if status:
            query = query.filter(status=status)
        return query.order_by("-created_at").limit(None).all().items
