"""Category aggregate root for grouping products."""

from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now
from storefront.shared.text import slugify


@storefront.aggregate
class Category:
    """A bilingual product grouping with an optional parent and a display position."""

    name_en: String(required=True, max_length=200)
    name_sv: String(required=True, max_length=200)
    slug: String(required=True, max_length=200, unique=True)
    description_en: Text()
    description_sv: Text()
    image_url: String(max_length=500)
    parent_id: Identifier()
    sort_order: Integer(default=0, min_value=0)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @classmethod
    def create(
        cls,
        name_en,
        name_sv,
        slug=None,
        description_en=None,
        description_sv=None,
        image_url=None,
        parent_id=None,
        sort_order=0,
    ):
        from storefront.catalogue.category.events import CategoryCreated

        timestamp = now()
        category = cls(
            name_en=name_en,
            name_sv=name_sv,
            slug=slug or slugify(name_en),
            description_en=description_en,
            description_sv=description_sv,
            image_url=image_url,
            parent_id=parent_id,
            sort_order=sort_order or 0,
            created_at=timestamp,
            updated_at=timestamp,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name_en=name_en,
                slug=category.slug,
                parent_id=parent_id,
            )
        )
        return category

    def update_details(self, **changes):
        """Apply a partial update; keys with ``None`` values are left untouched."""
        for field, value in changes.items():
            if value is not None:
                setattr(self, field, value)
        self.updated_at = now()

    def move_to(self, position):
        self.sort_order = position
        self.updated_at = now()
