"""Repository for the Product aggregate with storefront read queries."""

from storefront.catalogue.product.product import Product, ProductStatus
from storefront.domain import storefront

_ORDERINGS = {
    "newest": "-created_at",
    "price_asc": "price",
    "price_desc": "-price",
}


def _matches(product, term):
    term = term.lower()
    haystacks = (product.name_en, product.name_sv, product.sku, product.description_en)
    return any(term in value.lower() for value in haystacks if value)


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_slug(self, slug: str) -> Product | None:
        return self._dao.query.filter(slug=slug).all().first

    def find_active_by_slug(self, slug: str) -> Product | None:
        product = self.find_by_slug(slug)
        if product is None or not product.is_active:
            return None
        return product

    def _filtered(
        self,
        status=ProductStatus.ACTIVE.value,
        category_id=None,
        featured=None,
        min_price=None,
        max_price=None,
    ):
        criteria = {}
        if status:
            criteria["status"] = status
        if category_id:
            criteria["category_id"] = category_id
        if featured is not None:
            criteria["featured"] = featured
        if min_price is not None:
            criteria["price__gte"] = min_price
        if max_price is not None:
            criteria["price__lte"] = max_price
        return self._dao.query.filter(**criteria) if criteria else self._dao.query

    def search(
        self,
        status: str | None = ProductStatus.ACTIVE.value,
        category_id: str | None = None,
        featured: bool | None = None,
        query: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        sort: str = "newest",
    ) -> list[Product]:
        """Filter and sort products.

        Column filters and ordering go to the DAO; the free-text match spans
        several columns and runs over the filtered rows.
        """
        queryset = self._filtered(status, category_id, featured, min_price, max_price)
        if sort in _ORDERINGS:
            queryset = queryset.order_by(_ORDERINGS[sort])
        products = queryset.limit(None).all().items

        if query:
            products = [p for p in products if _matches(p, query)]
        if sort == "name":
            products = sorted(products, key=lambda p: p.name_en.lower())
        return products

    def count(self, status: str | None = ProductStatus.ACTIVE.value) -> int:
        return self._filtered(status=status).all().total

    def related(self, product: Product, limit: int = 4) -> list[Product]:
        if not product.category_id:
            return []
        candidates = self.search(category_id=str(product.category_id))
        return [p for p in candidates if str(p.id) != str(product.id)][:limit]

    def autocomplete(self, term: str, limit: int = 5) -> list[Product]:
        term = term.strip().lower()
        if not term:
            return []
        matches = [
            p
            for p in self.search()
            if term in p.name_en.lower() or term in p.name_sv.lower()
        ]
        # Prefix hits first, then substring hits
        matches.sort(key=lambda p: (not p.name_en.lower().startswith(term), p.name_en.lower()))
        return matches[:limit]
