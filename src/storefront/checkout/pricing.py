"""Cart pricing and checkout totals.

Catalogue prices include tax, so tax is extracted from the subtotal rather
than added to it. Shipping is charged on the pre-discount subtotal and the
discount never makes the total negative.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.catalogue.product.product import Product
from storefront.discounts.discount_code import DiscountCode
from storefront.discounts.validation import calculate_discount_amount, validate_discount_code
from storefront.settings.store_settings import effective_tax_rate, store_currency
from storefront.shared.money import round_money
from storefront.shipping.pricing import calculate_shipping_cost, resolve_region
from storefront.shipping.region import ShippingRegion


def price_cart(cart: ShoppingCart | None) -> list[dict]:
    """Current catalogue prices for each cart line.

    Lines whose product has since been deleted are dropped.
    """
    if cart is None:
        return []

    repo = current_domain.repository_for(Product)
    lines = []
    for item in sorted(cart.items, key=lambda i: i.added_at):
        try:
            product = repo.get(item.product_id)
        except ObjectNotFoundError:
            continue

        variant = product.get_variant(item.variant_id) if item.variant_id else None
        unit_price = round_money(product.unit_price(item.variant_id))
        image = product.primary_image
        lines.append(
            {
                "item_id": str(item.id),
                "product_id": str(product.id),
                "variant_id": str(variant.id) if variant else None,
                "product_name": product.name_en,
                "product_name_sv": product.name_sv,
                "slug": product.slug,
                "variant_name": variant.display_name if variant else None,
                "sku": (variant.sku if variant and variant.sku else product.sku),
                "unit_price": unit_price,
                "quantity": item.quantity,
                "total": round_money(unit_price * item.quantity),
                "image_url": image.url if image else None,
            }
        )
    return lines


def calculate_tax_from_inclusive(amount: float, rate: float) -> float:
    """Tax contained in a tax-inclusive ``amount`` at decimal ``rate`` (0.25 for 25%)."""
    if rate <= 0:
        return 0.0
    return round_money(amount * rate / (1 + rate))


def build_checkout_totals(
    lines: list[dict],
    region: ShippingRegion | None = None,
    discount: DiscountCode | None = None,
    tax_rate: float = 0.0,
) -> dict:
    subtotal = round_money(sum(line["total"] for line in lines))
    discount_amount = calculate_discount_amount(discount, subtotal)
    shipping_cost = calculate_shipping_cost(region, subtotal)
    tax = calculate_tax_from_inclusive(subtotal, tax_rate)
    total = round_money(max(subtotal - discount_amount, 0.0) + shipping_cost)

    return {
        "subtotal": subtotal,
        "discount_amount": discount_amount,
        "shipping_cost": shipping_cost,
        "tax": tax,
        "tax_rate": tax_rate,
        "total": total,
    }


def prepare_checkout(
    cart: ShoppingCart | None,
    region_id: str | None = None,
    country_code: str | None = None,
    discount_code: str | None = None,
    user_id: str | None = None,
    email: str | None = None,
) -> dict:
    """Price the cart, resolve shipping, validate the discount and compute totals.

    Returns the lines, totals, region, discount and currency. Raises
    ``ValidationError`` for an empty cart or an unusable discount code.
    """
    lines = price_cart(cart)
    if not lines:
        raise ValidationError({"cart": ["Cart is empty"]})

    region = resolve_region(region_id=region_id, country_code=country_code)
    subtotal = round_money(sum(line["total"] for line in lines))
    currency = store_currency()

    discount = None
    if discount_code:
        result = validate_discount_code(discount_code, subtotal, user_id=user_id, email=email, currency=currency)
        if not result.valid:
            raise ValidationError({"discount_code": [result.error]})
        discount = result.discount_code

    totals = build_checkout_totals(lines, region=region, discount=discount, tax_rate=effective_tax_rate())
    return {
        "lines": lines,
        "totals": totals,
        "region": region,
        "discount": discount,
        "currency": currency,
    }
