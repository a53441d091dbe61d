"""
판매 서비스 테스트
"""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from posdash.core.exceptions import ShopifyAPIException, ShopifyNotConfiguredException
from posdash.models import Product, ProductVariant, Sale, User
from posdash.schemas.sale import SaleCreateRequest, SaleItemRequest
from posdash.services.sale_service import SaleService, calculate_item_commission


@pytest.fixture
def cashier(test_db) -> User:
    user = User(email="cashier@shop.pk", password="x", name="Cashier")
    test_db.add(user)
    test_db.commit()
    return user


@pytest.fixture
def wallet(test_db) -> Product:
    product = Product(id="8001", title="Wallet", sale_price=1200, quantity=10)
    product.variants.append(ProductVariant(id="9001", price=1200, inventory_quantity=10))
    test_db.add(product)
    test_db.commit()
    return product


def item(**overrides) -> SaleItemRequest:
    data = {
        "product_id": "8001",
        "variant_id": "9001",
        "title": "Wallet",
        "price": 1200,
        "original_price": 1000,
        "quantity": 2,
        "inventory_tracked": True,
    }
    data.update(overrides)
    return SaleItemRequest(**data)


class TestCommission:
    """커미션 계산 테스트 클래스"""

    def test_price_at_or_below_original(self):
        """판매가 <= 정가: 판매가의 1%"""
        assert calculate_item_commission(1000, 1000, 1) == pytest.approx(10)
        assert calculate_item_commission(800, 1000, 3) == pytest.approx(24)

    def test_price_above_original(self):
        """판매가 > 정가: 정가의 1% + 초과분의 10%"""
        assert calculate_item_commission(1200, 1000, 1) == pytest.approx(30)
        assert calculate_item_commission(1200, 1000, 2) == pytest.approx(60)

    def test_no_original_price(self):
        """정가가 0이면 판매가 전체가 초과분"""
        assert calculate_item_commission(500, 0, 1) == pytest.approx(50)


class TestCreateSale:
    """판매 생성 테스트 클래스"""

    def test_create_sale_decrements_stock(self, test_db, cashier, wallet):
        data = SaleCreateRequest(
            items=[item()],
            subtotal=2400,
            total=2400,
            amount_received=3000,
            change=600,
            employee_id=3,
            employee_name="Ali",
        )

        sale = SaleService.create_sale(data, cashier.id, test_db)

        assert sale.id is not None
        assert sale.user_id == cashier.id
        assert sale.status == "completed"
        assert sale.commission == pytest.approx(60)
        assert len(sale.items) == 1
        assert sale.items[0].commission == pytest.approx(60)

        assert test_db.get(ProductVariant, "9001").inventory_quantity == 8
        assert test_db.get(Product, "8001").quantity == 8

    def test_unknown_product_ignored(self, test_db, cashier):
        """로컬에 없는 상품도 판매는 저장"""
        data = SaleCreateRequest(items=[item(product_id="x", variant_id="y")], total=2400)

        sale = SaleService.create_sale(data, cashier.id, test_db)

        assert sale.items[0].product_id == "x"

    def test_product_id_coerced_to_string(self):
        assert item(product_id=8001, variant_id=9001).product_id == "8001"


class TestSyncShopifyInventory:
    """판매 후 Shopify 재고 차감 테스트 클래스"""

    def test_success(self):
        client = MagicMock()
        client.get_locations.return_value = [{"id": 55}, {"id": 56}]
        client.get_variant.return_value = {"id": 9001, "inventory_item_id": 777}
        client.adjust_inventory.return_value = {"available": 3}

        updates = SaleService.sync_shopify_inventory([item()], client)

        client.adjust_inventory.assert_called_once_with(55, 777, -2)
        assert updates == [
            {
                "product_id": "8001",
                "variant_id": "9001",
                "title": "Wallet",
                "status": "success",
                "quantity": 2,
                "inventory_item_id": 777,
                "new_quantity": 3,
            }
        ]

    def test_untracked_items_skip_shopify(self):
        client = MagicMock()

        updates = SaleService.sync_shopify_inventory(
            [item(inventory_tracked=False), item(variant_id=None)], client
        )

        assert [u["reason"] for u in updates] == [
            "Inventory not tracked in Shopify",
            "No variant ID provided",
        ]
        client.get_locations.assert_not_called()

    def test_no_location(self):
        client = MagicMock()
        client.get_locations.return_value = []

        updates = SaleService.sync_shopify_inventory([item()], client)

        assert updates[0]["status"] == "skipped"
        assert updates[0]["reason"] == "No Shopify location found"

    def test_variant_missing_or_without_inventory_item(self):
        client = MagicMock()
        client.get_locations.return_value = [{"id": 55}]
        client.get_variant.side_effect = [None, {"id": 9002}]

        updates = SaleService.sync_shopify_inventory(
            [item(), item(variant_id="9002")], client
        )

        assert [u["reason"] for u in updates] == [
            "Variant not found",
            "No inventory_item_id found",
        ]
        client.adjust_inventory.assert_not_called()

    def test_one_failure_does_not_stop_others(self):
        client = MagicMock()
        client.get_locations.return_value = [{"id": 55}]
        client.get_variant.return_value = {"inventory_item_id": 777}
        client.adjust_inventory.side_effect = [
            ShopifyAPIException(500, "Shopify API Error: 500 - boom"),
            {"available": 1},
        ]

        updates = SaleService.sync_shopify_inventory(
            [item(), item(variant_id="9002")], client
        )

        assert [u["status"] for u in updates] == ["error", "success"]
        assert updates[0]["error"] == "Shopify API Error: 500 - boom"

    def test_not_configured(self):
        client = MagicMock()
        client.get_locations.side_effect = ShopifyNotConfiguredException()

        updates = SaleService.sync_shopify_inventory([item()], client)

        assert updates[0]["status"] == "skipped"
        assert updates[0]["reason"] == "Shopify not configured"

    def test_location_lookup_error(self):
        client = MagicMock()
        client.get_locations.side_effect = ShopifyAPIException(401, "Authentication Failed")

        updates = SaleService.sync_shopify_inventory([item()], client)

        assert updates[0]["status"] == "error"
        assert updates[0]["error"] == "Authentication Failed"


class TestListSales:
    """판매 목록/통계 테스트 클래스"""

    @pytest.fixture
    def sales(self, test_db, cashier):
        rows = [
            (datetime(2025, 1, 20, 10), "completed", 1000, 100, 10, 1),
            (datetime(2025, 1, 21, 23, 59), "completed", 2000, 0, 20, 2),
            (datetime(2025, 1, 21, 12), "refunded", 500, 0, 5, 1),
            (datetime(2025, 1, 22, 9), "completed", 3000, 50, 30, 1),
        ]
        for created_at, status, total, discount, commission, employee_id in rows:
            test_db.add(
                Sale(
                    subtotal=total,
                    total=total,
                    discount=discount,
                    commission=commission,
                    status=status,
                    employee_id=employee_id,
                    user_id=cashier.id,
                    created_at=created_at,
                )
            )
        test_db.commit()

    def test_newest_first_with_stats(self, test_db, sales):
        result, total, stats = SaleService.list_sales(test_db)

        assert total == 4
        assert [s.total for s in result] == [3000, 2000, 500, 1000]
        # completed만 집계
        assert stats == {
            "total_sales": 3,
            "total_revenue": 6000,
            "total_discount": 150,
            "total_commission": 60,
        }

    def test_date_range_inclusive(self, test_db, sales):
        result, total, stats = SaleService.list_sales(
            test_db, start_date=date(2025, 1, 21), end_date=date(2025, 1, 21)
        )

        assert total == 2
        assert stats["total_sales"] == 1
        assert stats["total_revenue"] == 2000

    def test_status_and_employee_filters(self, test_db, sales):
        result, total, stats = SaleService.list_sales(
            test_db, status="completed", employee_id=1
        )

        assert total == 2
        assert {s.total for s in result} == {1000, 3000}
        assert stats["total_revenue"] == 4000

    def test_pagination(self, test_db, sales):
        result, total, _ = SaleService.list_sales(test_db, limit=2, offset=1)

        assert total == 4
        assert [s.total for s in result] == [2000, 500]
