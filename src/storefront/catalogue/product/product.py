"""Product aggregate root with Variant and Image entities."""

from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.clock import now
from storefront.shared.text import slugify


class ProductStatus(Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


_VARIANT_FIELDS = (
    "name_en",
    "name_sv",
    "sku",
    "price",
    "compare_at_price",
    "stock_quantity",
    "track_inventory",
    "option1_name",
    "option1_value",
    "option2_name",
    "option2_value",
    "option3_name",
    "option3_value",
)


@storefront.entity(part_of="Product")
class Variant:
    """A purchasable option of a product (size, colour, glaze...).

    ``price`` overrides the product price when set.
    """

    name_en: String(max_length=200)
    name_sv: String(max_length=200)
    sku: String(max_length=100)
    price: Float(min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    stock_quantity: Integer(default=0, min_value=0)
    track_inventory: Boolean(default=True)
    option1_name: String(max_length=100)
    option1_value: String(max_length=100)
    option2_name: String(max_length=100)
    option2_value: String(max_length=100)
    option3_name: String(max_length=100)
    option3_value: String(max_length=100)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @property
    def display_name(self):
        if self.name_en:
            return self.name_en
        values = [v for v in (self.option1_value, self.option2_value, self.option3_value) if v]
        return " / ".join(values) or None


@storefront.entity(part_of="Product")
class Image:
    url: String(required=True, max_length=500)
    variant_id: Identifier()
    alt_text_en: String(max_length=255)
    alt_text_sv: String(max_length=255)
    sort_order: Integer(default=0)
    created_at: DateTime(default=now)


@storefront.aggregate
class Product:
    """A catalogue item sold in the storefront.

    Prices are tax-inclusive amounts in the store currency. Only ``active``
    products are visible to shoppers and can be added to a cart.
    """

    name_en: String(required=True, max_length=255)
    name_sv: String(required=True, max_length=255)
    slug: String(required=True, max_length=255, unique=True)
    description_en: Text()
    description_sv: Text()
    instructions_en: Text()
    instructions_sv: Text()
    category_id: Identifier()
    price: Float(required=True, min_value=0.0)
    compare_at_price: Float(min_value=0.0)
    sku: String(max_length=100)
    status: String(choices=ProductStatus, default=ProductStatus.DRAFT.value)
    featured: Boolean(default=False)
    stock_quantity: Integer(default=0, min_value=0)
    track_inventory: Boolean(default=True)
    variants: HasMany(Variant)
    images: HasMany(Image)
    created_at: DateTime(default=now)
    updated_at: DateTime(default=now)

    @invariant.post
    def variant_skus_must_be_unique(self):
        skus = [v.sku for v in self.variants if v.sku]
        if len(skus) != len(set(skus)):
            raise ValidationError({"variants": ["Variant SKUs must be unique within a product"]})

    @classmethod
    def create(
        cls,
        name_en,
        name_sv,
        price,
        slug=None,
        description_en=None,
        description_sv=None,
        instructions_en=None,
        instructions_sv=None,
        category_id=None,
        compare_at_price=None,
        sku=None,
        status=None,
        featured=False,
        stock_quantity=0,
        track_inventory=True,
    ):
        from storefront.catalogue.product.events import ProductCreated

        timestamp = now()
        product = cls(
            name_en=name_en,
            name_sv=name_sv,
            slug=slug or slugify(name_en),
            description_en=description_en,
            description_sv=description_sv,
            instructions_en=instructions_en,
            instructions_sv=instructions_sv,
            category_id=category_id,
            price=price,
            compare_at_price=compare_at_price,
            sku=sku,
            status=status or ProductStatus.DRAFT.value,
            featured=bool(featured),
            stock_quantity=stock_quantity or 0,
            track_inventory=True if track_inventory is None else track_inventory,
            created_at=timestamp,
            updated_at=timestamp,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name_en=name_en,
                slug=product.slug,
                price=price,
                category_id=category_id,
                status=product.status,
                created_at=timestamp,
            )
        )
        return product

    @property
    def is_active(self):
        return self.status == ProductStatus.ACTIVE.value

    @property
    def primary_image(self):
        if not self.images:
            return None
        return sorted(self.images, key=lambda i: i.sort_order or 0)[0]

    def get_variant(self, variant_id):
        return next((v for v in self.variants if str(v.id) == str(variant_id)), None)

    def unit_price(self, variant_id=None):
        """Variant price when the variant carries one, otherwise the product price."""
        if variant_id:
            variant = self.get_variant(variant_id)
            if variant is not None and variant.price is not None:
                return variant.price
        return self.price

    def update_details(self, **changes):
        """Apply a partial update; keys with ``None`` values are left untouched."""
        from storefront.catalogue.product.events import ProductUpdated

        applied = {field: value for field, value in changes.items() if value is not None}
        for field, value in applied.items():
            setattr(self, field, value)
        self.updated_at = now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=sorted(applied),
                price=self.price,
            )
        )

    def change_status(self, status):
        from storefront.catalogue.product.events import ProductStatusChanged

        new_status = ProductStatus(status).value
        if new_status == self.status:
            return

        previous = self.status
        self.status = new_status
        self.updated_at = now()

        self.raise_(
            ProductStatusChanged(
                product_id=self.id,
                previous_status=previous,
                new_status=new_status,
            )
        )

    def assign_category(self, category_id):
        """Move the product into ``category_id``, or out of any category when ``None``."""
        from storefront.catalogue.product.events import ProductUpdated

        if category_id == self.category_id:
            return

        self.category_id = category_id
        self.updated_at = now()
        self.raise_(ProductUpdated(product_id=self.id, changed_fields=["category_id"], price=self.price))

    # -------------------------------------------------------------------
    # Variants
    # -------------------------------------------------------------------
    def add_variant(self, **attributes):
        variant = Variant(**{k: v for k, v in attributes.items() if k in _VARIANT_FIELDS and v is not None})
        self.add_variants(variant)
        self.updated_at = now()
        return variant

    def update_variant(self, variant_id, **changes):
        variant = self.get_variant(variant_id)
        if variant is None:
            raise ValidationError({"variants": [f"Variant {variant_id} not found"]})

        for field, value in changes.items():
            if field in _VARIANT_FIELDS and value is not None:
                setattr(variant, field, value)
        variant.updated_at = now()
        self.updated_at = now()

    def remove_variant(self, variant_id):
        variant = self.get_variant(variant_id)
        if variant is None:
            raise ValidationError({"variants": [f"Variant {variant_id} not found"]})

        with atomic_change(self):
            self.remove_variants(variant)
            for image in self.images:
                if str(image.variant_id) == str(variant_id):
                    image.variant_id = None
        self.updated_at = now()

    # -------------------------------------------------------------------
    # Images
    # -------------------------------------------------------------------
    def add_image(self, url, alt_text_en=None, alt_text_sv=None, variant_id=None):
        if variant_id and self.get_variant(variant_id) is None:
            raise ValidationError({"variant_id": [f"Variant {variant_id} not found"]})

        image = Image(
            url=url,
            alt_text_en=alt_text_en,
            alt_text_sv=alt_text_sv,
            variant_id=variant_id,
            sort_order=len(self.images),
        )
        self.add_images(image)
        self.updated_at = now()
        return image

    def remove_image(self, image_id):
        image = next((i for i in self.images if str(i.id) == str(image_id)), None)
        if image is None:
            raise ValidationError({"images": [f"Image {image_id} not found"]})

        with atomic_change(self):
            self.remove_images(image)
            for position, remaining in enumerate(sorted(self.images, key=lambda i: i.sort_order or 0)):
                remaining.sort_order = position
        self.updated_at = now()

    def reorder_images(self, image_ids):
        by_id = {str(i.id): i for i in self.images}
        if sorted(by_id) != sorted(str(i) for i in image_ids):
            raise ValidationError({"images": ["Image order must list every image of the product exactly once"]})

        for position, image_id in enumerate(image_ids):
            by_id[str(image_id)].sort_order = position
        self.updated_at = now()
