"""Application tests for back-office dashboard figures."""

from protean import current_domain

from storefront.admin.stats import dashboard_stats, low_stock_products
from storefront.orders.management import UpdateOrderStatus
from storefront.settings.management import UpdateStoreSettings
from storefront.support.management import SubmitContactMessage


class TestDashboardStats:
    def test_empty_shop(self):
        stats = dashboard_stats()
        assert stats["total_products"] == 0
        assert stats["revenue"] == 0.0
        assert stats["unread_messages"] == 0

    def test_counts(self, make_product, make_user, make_order):
        make_product()
        make_product(name_en="Draft Vase", name_sv="Vas", status="draft")
        make_product(name_en="Mug", name_sv="Mugg", stock_quantity=2)
        make_user()

        make_order()
        make_order(payment_status="pending", payment_intent_id="pi_2")
        cancelled = make_order(payment_status="pending", payment_intent_id="pi_3")
        current_domain.process(UpdateOrderStatus(order_id=cancelled.id, status="cancelled"), asynchronous=False)

        current_domain.process(
            SubmitContactMessage(name="Anna", email="anna@example.com", message="Hello"), asynchronous=False
        )

        stats = dashboard_stats()
        assert stats["total_products"] == 3
        assert stats["active_products"] == 2
        assert stats["total_orders"] == 3
        assert stats["pending_orders"] == 1
        assert stats["revenue"] == 299.0
        assert stats["total_users"] == 1
        assert stats["low_stock_products"] == 1
        assert stats["unread_messages"] == 1

    def test_revenue_sums_every_paid_order(self, make_order):
        for i in range(105):
            make_order(payment_intent_id=f"pi_{i}")

        stats = dashboard_stats()

        assert stats["total_orders"] == 105
        assert stats["revenue"] == 31395.0


class TestLowStock:
    def test_only_active_tracked_products_below_threshold(self, make_product):
        make_product(name_en="Low", name_sv="Låg", stock_quantity=3)
        make_product(name_en="Untracked", name_sv="Ospårad", stock_quantity=0, track_inventory=False)
        make_product(name_en="Draft", name_sv="Utkast", stock_quantity=0, status="draft")
        make_product(name_en="Plenty", name_sv="Många", stock_quantity=50)

        assert [p.name_en for p in low_stock_products(10)] == ["Low"]

    def test_threshold_from_settings(self, make_product):
        make_product(stock_quantity=15)
        current_domain.process(UpdateStoreSettings(low_stock_threshold=20), asynchronous=False)
        assert dashboard_stats()["low_stock_products"] == 1
