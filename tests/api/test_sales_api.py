"""
판매 API 테스트
"""

from datetime import datetime

import pytest

from posdash.models import Product, ProductVariant, Sale


@pytest.fixture
def wallet(test_db):
    product = Product(
        id="8001",
        title="Leather Wallet",
        sale_price=1200,
        quantity=5,
        variants=[ProductVariant(id="9001", price=1200, inventory_quantity=5)],
    )
    test_db.add(product)
    test_db.commit()
    return product


@pytest.fixture
def shopify_inventory(shopify_session, make_response):
    """locations / product / adjust 호출에 URL별로 응답하는 mock"""

    def _respond(method, url, **kwargs):
        if url.endswith("/locations.json"):
            return make_response(json_data={"locations": [{"id": 55}]})
        if url.endswith("/products/8001.json"):
            return make_response(
                json_data={"product": {"variants": [{"id": 9001, "inventory_item_id": 777}]}}
            )
        if url.endswith("/inventory_levels/adjust.json"):
            return make_response(json_data={"inventory_level": {"available": 3}})
        return make_response(status_code=404, text="not found")

    shopify_session.request.side_effect = _respond
    return shopify_session


def sale_body(**overrides):
    body = {
        "items": [
            {
                "product_id": 8001,
                "variant_id": 9001,
                "title": "Leather Wallet",
                "price": 1200,
                "original_price": 1000,
                "quantity": 2,
                "inventory_tracked": True,
            }
        ],
        "subtotal": 2400,
        "total": 2400,
        "payment_method": "cash",
        "amount_received": 2500,
        "change": 100,
    }
    body.update(overrides)
    return body


class TestCreateSaleAPI:
    """판매 등록 API 테스트 클래스"""

    def test_create_sale(self, test_client, auth_headers, test_db, wallet, shopify_inventory):
        response = test_client.post("/api/sales", headers=auth_headers, json=sale_body())

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Sale completed successfully"
        assert data["sale"]["total"] == 2400
        assert data["sale"]["commission"] == 60
        assert data["sale"]["user_email"] == "admin@shop.pk"
        assert data["sale"]["items"][0]["product_id"] == "8001"

        update = data["inventory_updates"][0]
        assert update["status"] == "success"
        assert update["inventory_item_id"] == 777
        assert update["new_quantity"] == 3

        adjust_call = shopify_inventory.request.call_args_list[-1]
        assert adjust_call.kwargs["json"] == {
            "location_id": 55,
            "inventory_item_id": 777,
            "available_adjustment": -2,
        }

        test_db.refresh(wallet)
        assert wallet.quantity == 3
        assert wallet.variants[0].inventory_quantity == 3

    def test_shopify_failure_keeps_sale(self, test_client, auth_headers, test_db, wallet, shopify_session, make_response):
        shopify_session.request.return_value = make_response(status_code=500, text="down")

        response = test_client.post("/api/sales", headers=auth_headers, json=sale_body())

        assert response.status_code == 201
        assert response.json()["inventory_updates"][0]["status"] == "error"
        assert test_db.query(Sale).count() == 1

    def test_untracked_item_skipped(self, test_client, auth_headers, wallet, shopify_session):
        body = sale_body()
        body["items"][0]["inventory_tracked"] = False

        data = test_client.post("/api/sales", headers=auth_headers, json=body).json()

        assert data["inventory_updates"][0]["reason"] == "Inventory not tracked in Shopify"
        shopify_session.request.assert_not_called()

    def test_empty_cart(self, test_client, auth_headers):
        response = test_client.post("/api/sales", headers=auth_headers, json=sale_body(items=[]))

        assert response.status_code == 422

    def test_requires_auth(self, test_client):
        assert test_client.post("/api/sales", json=sale_body()).status_code == 401


class TestListSalesAPI:
    """판매 목록 API 테스트 클래스"""

    def test_list_with_stats(self, test_client, auth_headers, test_db, admin_user):
        test_db.add_all(
            [
                Sale(total=1000, discount=100, status="completed", user_id=admin_user.id, created_at=datetime(2025, 1, 21, 10)),
                Sale(total=3000, status="completed", user_id=admin_user.id, created_at=datetime(2025, 1, 22, 23, 59)),
                Sale(total=500, status="refunded", user_id=admin_user.id, created_at=datetime(2025, 1, 22, 12)),
            ]
        )
        test_db.commit()

        data = test_client.get(
            "/api/sales",
            headers=auth_headers,
            params={"start_date": "2025-01-22", "end_date": "2025-01-22"},
        ).json()

        assert data["total"] == 2
        assert [s["total"] for s in data["sales"]] == [3000, 500]
        assert data["stats"]["total_sales"] == 1
        assert data["stats"]["total_revenue"] == 3000
        assert data["limit"] == 100
        assert data["offset"] == 0

    def test_status_filter(self, test_client, auth_headers, test_db, admin_user):
        test_db.add_all(
            [
                Sale(total=1000, status="completed", user_id=admin_user.id),
                Sale(total=500, status="refunded", user_id=admin_user.id),
            ]
        )
        test_db.commit()

        data = test_client.get(
            "/api/sales", headers=auth_headers, params={"status": "refunded"}
        ).json()

        assert [s["total"] for s in data["sales"]] == [500]
        # 통계는 completed 판매만
        assert data["stats"]["total_revenue"] == 1000
