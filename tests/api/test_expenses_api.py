"""
지출 API 테스트
"""

from posdash.models import Expense, User


class TestExpenseTitlesAPI:
    """지출 항목 API 테스트 클래스"""

    def test_create_and_list_titles(self, test_client, auth_headers):
        created = test_client.post(
            "/api/expenses/titles", headers=auth_headers, json={"exp_title": " Rent "}
        )

        assert created.status_code == 201
        assert created.json()["title"]["exp_title"] == "Rent"

        titles = test_client.get("/api/expenses/titles", headers=auth_headers).json()["titles"]
        assert [t["exp_title"] for t in titles] == ["Rent"]

    def test_blank_title(self, test_client, auth_headers):
        response = test_client.post(
            "/api/expenses/titles", headers=auth_headers, json={"exp_title": "  "}
        )

        assert response.status_code == 422
        assert response.json()["error"] == "Validation failed"


class TestExpensesAPI:
    """지출 내역 API 테스트 클래스"""

    def _title_id(self, client, headers, name="Electricity"):
        response = client.post("/api/expenses/titles", headers=headers, json={"exp_title": name})
        return response.json()["title"]["id"]

    def test_create_and_list(self, test_client, auth_headers):
        title_id = self._title_id(test_client, auth_headers)

        created = test_client.post(
            "/api/expenses",
            headers=auth_headers,
            json={
                "exp_title_id": title_id,
                "exp_amount": 4500,
                "exp_date": "2025-01-22T10:00:00",
            },
        )
        assert created.status_code == 201
        expense = created.json()["expense"]
        assert expense["exp_title"] == "Electricity"
        assert expense["user_email"] == "admin@shop.pk"

        data = test_client.get(
            "/api/expenses",
            headers=auth_headers,
            params={"start_date": "2025-01-22", "end_date": "2025-01-22"},
        ).json()
        assert data["total"] == 1
        assert data["stats"] == {"total_expenses": 1, "total_amount": 4500}
        assert data["title_breakdown"][0]["exp_title"] == "Electricity"

    def test_unknown_title(self, test_client, auth_headers):
        response = test_client.post(
            "/api/expenses",
            headers=auth_headers,
            json={"exp_title_id": 42, "exp_amount": 10},
        )

        assert response.status_code == 404

    def test_delete_own_only(self, test_client, auth_headers, test_db):
        title_id = self._title_id(test_client, auth_headers)
        other = User(email="other@shop.pk", password="x")
        test_db.add(other)
        test_db.commit()

        mine = test_client.post(
            "/api/expenses",
            headers=auth_headers,
            json={"exp_title_id": title_id, "exp_amount": 100},
        ).json()["expense"]

        theirs = Expense(exp_title_id=title_id, exp_amount=50, added_by=other.id)
        test_db.add(theirs)
        test_db.commit()

        assert test_client.delete(f"/api/expenses/{theirs.id}", headers=auth_headers).status_code == 404
        assert test_client.delete(f"/api/expenses/{mine['id']}", headers=auth_headers).status_code == 200
