"""
Shopify 상품 동기화 API 테스트
"""

from unittest.mock import MagicMock

from posdash.api.deps import get_shopify_client
from posdash.core.config import Settings
from posdash.integrations.shopify import ShopifyClient
from posdash.main import app
from posdash.models import Product
from posdash.services.product_sync_service import EXTEND_LOCK_SCRIPT, RELEASE_LOCK_SCRIPT


def shopify_product(product_id: int, title: str) -> dict:
    return {
        "id": product_id,
        "title": title,
        "handle": title.lower().replace(" ", "-"),
        "status": "active",
        "variants": [
            {"id": product_id * 10, "price": "1500.00", "inventory_quantity": 2, "sku": f"SKU-{product_id}"}
        ],
        "images": [],
    }


class TestSyncBatchAPI:
    """배치 동기화 API 테스트 클래스"""

    def test_sync_batch(self, test_client, auth_headers, test_db, shopify_session, make_response, redis_client):
        shopify_session.request.return_value = make_response(
            json_data={"products": [shopify_product(1, "Kurta"), shopify_product(2, "Shawl")]}
        )

        response = test_client.post(
            "/api/products/sync", headers=auth_headers, params={"batch_size": 1}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["imported"] == 1
        assert data["failed"] == 0
        assert data["next_offset"] == 1
        assert data["has_more"] is True
        assert test_db.query(Product).count() == 1
        # 락 획득, 조회 후 만료 갱신, 해제
        redis_client.set.assert_called_once()
        scripts = [call.args[0] for call in redis_client.eval.call_args_list]
        assert scripts == [EXTEND_LOCK_SCRIPT, RELEASE_LOCK_SCRIPT]

    def test_sync_empty(self, test_client, auth_headers, shopify_session, make_response):
        shopify_session.request.return_value = make_response(json_data={"products": []})

        data = test_client.post("/api/products/sync", headers=auth_headers).json()

        assert data["total"] == 0
        assert data["next_offset"] is None
        assert data["message"] == "No products found to sync"

    def test_sync_in_progress(self, test_client, auth_headers, redis_client, shopify_session):
        redis_client.set.return_value = None

        response = test_client.post("/api/products/sync", headers=auth_headers)

        assert response.status_code == 409
        assert "already in progress" in response.json()["error"]
        shopify_session.request.assert_not_called()

    def test_shopify_error(self, test_client, auth_headers, shopify_session, make_response):
        shopify_session.request.return_value = make_response(status_code=500, text="boom")

        response = test_client.post("/api/products/sync", headers=auth_headers)

        assert response.status_code == 502
        assert response.json()["error"] == "Shopify API Error: 500 - boom"

    def test_not_configured(self, test_client, auth_headers):
        app.dependency_overrides[get_shopify_client] = lambda: ShopifyClient(
            Settings(shopify_store_domain="", shopify_access_token=""),
            session=MagicMock(),
        )

        response = test_client.post("/api/products/sync", headers=auth_headers)

        assert response.status_code == 503
        assert "SHOPIFY_ACCESS_TOKEN" in response.json()["error"]


class TestSyncPageAPI:
    """커서 기반 페이지 동기화 API 테스트 클래스"""

    def test_sync_page(self, test_client, auth_headers, shopify_session, make_response):
        shopify_session.request.return_value = make_response(
            json_data={"products": [shopify_product(5, "Chadar")]},
            headers={
                "Link": '<https://test-store.myshopify.com/admin/api/2024-01/products.json?page_info=nxt>; rel="next"'
            },
        )

        data = test_client.post(
            "/api/products/sync/page",
            headers=auth_headers,
            params={"limit": 50, "page_info": "cur", "status": "active"},
        ).json()

        assert data["imported"] == 1
        assert data["next_page_info"] == "nxt"
        assert data["has_more"] is True
        params = shopify_session.request.call_args.kwargs["params"]
        assert params == {"limit": 50, "page_info": "cur"}


class TestSyncStatusAPI:
    """동기화 현황 API 테스트 클래스"""

    def test_status(self, test_client, auth_headers, test_db, shopify_session, make_response):
        test_db.add(Product(id="1", title="A"))
        test_db.commit()
        shopify_session.request.return_value = make_response(json_data={"count": 8})

        data = test_client.get("/api/products/sync/status", headers=auth_headers).json()

        assert data == {
            "success": True,
            "shopify_products": 8,
            "local_products": 1,
            # 12.5%는 올림
            "sync_percentage": 13,
            "remaining": 7,
        }
