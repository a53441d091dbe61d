"""
카테고리 API 테스트
"""

from posdash.models import Product


class TestCategoriesAPI:
    """카테고리 API 테스트 클래스"""

    def test_crud(self, test_client, auth_headers, test_db):
        created = test_client.post(
            "/api/categories",
            headers=auth_headers,
            json={"name": "Watches", "slug": "watches"},
        )
        assert created.status_code == 201
        category_id = created.json()["category"]["id"]

        test_db.add(Product(id="1", title="Casio", category_id=category_id))
        test_db.commit()

        listed = test_client.get("/api/categories", headers=auth_headers).json()
        assert listed["categories"][0]["products_count"] == 1

        updated = test_client.put(
            f"/api/categories/{category_id}",
            headers=auth_headers,
            json={"name": "Wrist Watches", "slug": "wrist-watches"},
        )
        assert updated.json()["category"]["slug"] == "wrist-watches"

        deleted = test_client.delete(f"/api/categories/{category_id}", headers=auth_headers)
        assert deleted.status_code == 200

        product = test_client.get("/api/products/1", headers=auth_headers).json()["product"]
        assert product["category_id"] is None

    def test_duplicate_slug(self, test_client, auth_headers):
        body = {"name": "Bags", "slug": "bags"}
        test_client.post("/api/categories", headers=auth_headers, json=body)

        response = test_client.post("/api/categories", headers=auth_headers, json=body)

        assert response.status_code == 409

    def test_missing_category(self, test_client, auth_headers):
        response = test_client.delete("/api/categories/404", headers=auth_headers)

        assert response.status_code == 404
        assert "not found" in response.json()["error"]
