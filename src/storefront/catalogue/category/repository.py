"""Repository for the Category aggregate."""

from storefront.catalogue.category.category import Category
from storefront.domain import storefront


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        return self._dao.query.filter(slug=slug).all().first

    def list_ordered(self) -> list[Category]:
        categories = self._dao.query.limit(None).all().items
        return sorted(categories, key=lambda c: (c.sort_order or 0, c.name_en.lower()))
