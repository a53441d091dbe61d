"""
인증 API 엔드포인트 통합 테스트
"""

from posdash.core.security import hash_password
from posdash.models.user import User

ADMIN_EMAIL = "admin@shop.pk"
ADMIN_PASSWORD = "adminpass123"


class TestLoginAPI:
    """로그인 API 테스트 클래스"""

    def test_login_success(self, test_client, admin_user):
        """로그인 성공 시 bearer 토큰 발급"""
        response = test_client.post(
            "/api/auth/login",
            json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]

    def test_login_email_case_insensitive(self, test_client, admin_user):
        response = test_client.post(
            "/api/auth/login",
            json={"email": "  Admin@Shop.PK ", "password": ADMIN_PASSWORD},
        )

        assert response.status_code == 200

    def test_login_wrong_password(self, test_client, admin_user):
        response = test_client.post(
            "/api/auth/login",
            json={"email": ADMIN_EMAIL, "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": "Invalid email or password",
        }

    def test_login_unknown_email(self, test_client):
        response = test_client.post(
            "/api/auth/login",
            json={"email": "ghost@shop.pk", "password": "whatever"},
        )

        assert response.status_code == 401

    def test_login_inactive_user(self, test_client, test_db):
        test_db.add(
            User(
                email="old@shop.pk",
                password=hash_password("password1"),
                status="inactive",
            )
        )
        test_db.commit()

        response = test_client.post(
            "/api/auth/login",
            json={"email": "old@shop.pk", "password": "password1"},
        )

        assert response.status_code == 401


class TestMeAPI:
    """현재 사용자 조회 API 테스트 클래스"""

    def test_me(self, test_client, auth_headers):
        response = test_client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["email"] == ADMIN_EMAIL
        assert data["user"]["role"] == "admin"
        # 비밀번호 해시는 응답에 포함되지 않아야 함
        assert "password" not in data["user"]

    def test_me_without_token(self, test_client):
        response = test_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_me_invalid_token(self, test_client):
        response = test_client.get(
            "/api/auth/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
