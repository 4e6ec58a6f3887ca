"""Domain tests for tax extraction and checkout totals."""

from storefront.checkout.pricing import build_checkout_totals, calculate_tax_from_inclusive
from storefront.discounts.discount_code import DiscountCode
from storefront.shipping.region import ShippingRegion


def _line(unit_price, quantity=1):
    return {"unit_price": unit_price, "quantity": quantity, "total": unit_price * quantity}


def _region(**overrides):
    defaults = {
        "name_en": "Sweden",
        "name_sv": "Sverige",
        "code": "SE",
        "base_price": 49.0,
        "countries": ["SE"],
        "free_shipping_threshold": 500.0,
    }
    defaults.update(overrides)
    return ShippingRegion.create(**defaults)


class TestTaxFromInclusive:
    def test_swedish_vat(self):
        assert calculate_tax_from_inclusive(1250, 0.25) == 250.0

    def test_rounded_to_two_decimals(self):
        assert calculate_tax_from_inclusive(100, 0.12) == 10.71

    def test_zero_rate(self):
        assert calculate_tax_from_inclusive(100, 0) == 0.0


class TestCheckoutTotals:
    def test_no_region_no_discount(self):
        totals = build_checkout_totals([_line(125.0, 2)], tax_rate=0.25)
        assert totals["subtotal"] == 250.0
        assert totals["shipping_cost"] == 0.0
        assert totals["tax"] == 50.0
        assert totals["total"] == 250.0

    def test_shipping_added_below_threshold(self):
        totals = build_checkout_totals([_line(250.0)], region=_region())
        assert totals["shipping_cost"] == 49.0
        assert totals["total"] == 299.0

    def test_threshold_uses_pre_discount_subtotal(self):
        discount = DiscountCode.create(code="TENOFF", discount_type="percentage", discount_value=10)
        totals = build_checkout_totals([_line(500.0)], region=_region(), discount=discount)
        assert totals["discount_amount"] == 50.0
        assert totals["shipping_cost"] == 0.0
        assert totals["total"] == 450.0

    def test_discount_never_makes_total_negative(self):
        discount = DiscountCode.create(code="BIG", discount_type="fixed", discount_value=1000)
        totals = build_checkout_totals([_line(100.0)], region=_region(), discount=discount)
        assert totals["discount_amount"] == 100.0
        assert totals["total"] == 49.0
