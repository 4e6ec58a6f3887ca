"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, List, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name_en: String(required=True)
    slug: String(required=True)
    price: Float(required=True)
    category_id: Identifier()
    status: String(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Descriptive or commercial product fields changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: List(content_type=String)
    price: Float()


@storefront.event(part_of="Product")
class ProductStatusChanged:
    """The product moved between draft, active and archived."""

    __version__ = 1

    product_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)


@storefront.event(part_of="Product")
class ProductDeleted:
    __version__ = 1

    product_id: Identifier(required=True)
    slug: String(required=True)
