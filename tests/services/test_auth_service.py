"""
인증 서비스 테스트
"""

from datetime import datetime, timedelta, timezone
import pytest
import jwt

from posdash.services.auth_service import AuthService
from posdash.core.security import hash_password, create_access_token
from posdash.core.exceptions import InvalidCredentialsException, UserNotFoundException
from posdash.models.user import User


def add_user(db, email="cashier@shop.pk", password="cashier123", status="active") -> User:
    user = User(email=email, password=hash_password(password), name="Cashier", status=status)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


class TestAuthenticateUser:
    """로그인 인증 테스트 클래스"""

    def test_authenticate_success(self, test_db):
        user = add_user(test_db)

        authenticated = AuthService.authenticate_user("cashier@shop.pk", "cashier123", test_db)

        assert authenticated is not None
        assert authenticated.id == user.id

    def test_email_is_normalized(self, test_db):
        """대소문자, 앞뒤 공백이 달라도 로그인"""
        add_user(test_db)

        assert AuthService.authenticate_user("  Cashier@Shop.PK ", "cashier123", test_db)

    def test_wrong_password(self, test_db):
        add_user(test_db)

        assert AuthService.authenticate_user("cashier@shop.pk", "wrong", test_db) is None

    def test_unknown_email(self, test_db):
        assert AuthService.authenticate_user("nobody@shop.pk", "cashier123", test_db) is None

    def test_inactive_user_refused(self, test_db):
        add_user(test_db, status="inactive")

        assert AuthService.authenticate_user("cashier@shop.pk", "cashier123", test_db) is None


class TestGetCurrentUser:
    """토큰 기반 사용자 조회 테스트 클래스"""

    def test_valid_token(self, test_db, settings):
        user = add_user(test_db)
        token = create_access_token({"sub": user.email, "user_id": user.id}, settings)

        assert AuthService.get_current_user(token, test_db, settings).id == user.id

    def test_expired_token(self, test_db, settings):
        token = jwt.encode(
            {"sub": "cashier@shop.pk", "exp": datetime.now(timezone.utc) - timedelta(seconds=1)},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(InvalidCredentialsException, match="expired"):
            AuthService.get_current_user(token, test_db, settings)

    def test_invalid_token(self, test_db, settings):
        with pytest.raises(InvalidCredentialsException, match="Invalid token"):
            AuthService.get_current_user("not-a-token", test_db, settings)

    def test_missing_sub(self, test_db, settings):
        token = create_access_token({"user_id": 1}, settings)

        with pytest.raises(InvalidCredentialsException, match="sub"):
            AuthService.get_current_user(token, test_db, settings)

    def test_user_deleted(self, test_db, settings):
        token = create_access_token({"sub": "ghost@shop.pk"}, settings)

        with pytest.raises(UserNotFoundException):
            AuthService.get_current_user(token, test_db, settings)
