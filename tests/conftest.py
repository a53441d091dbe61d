"""
pytest 픽스처 정의
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

import posdash.models  # noqa: F401  모든 테이블을 Base.metadata에 등록
from posdash.api.deps import get_shopify_client
from posdash.core.config import Settings, get_settings
from posdash.core.security import hash_password
from posdash.db.database import Base, get_db
from posdash.db.redis_client import get_redis_client
from posdash.integrations.shopify import ShopifyClient
from posdash.main import app
from posdash.models.user import User

ADMIN_EMAIL = "admin@shop.pk"
ADMIN_PASSWORD = "adminpass123"


@pytest.fixture(scope="session")
def settings():
    """테스트용 설정 객체 픽스처"""
    return Settings(
        database_url="sqlite://",
        jwt_secret_key="test-secret-key-for-testing",
        jwt_algorithm="HS256",
        jwt_expiration_minutes=30,
        redis_host="localhost",
        redis_port=6379,
        redis_db=1,  # 테스트용 DB 프로덕션과 분리
        redis_password="",
        sync_lock_timeout_seconds=10,
        shopify_store_domain="test-store.myshopify.com",
        shopify_access_token="shpat_test_token",
        shopify_api_version="2024-01",
    )


@pytest.fixture(scope="function")
def engine():
    """
    테스트용 in-memory SQLite 엔진

    StaticPool로 모든 스레드(TestClient 포함)가 같은 connection을 공유합니다.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(engine) -> Session:
    """
    테스트용 데이터베이스 세션 픽스처

    각 테스트 함수마다 새로운 데이터베이스를 생성하고 종료 후 삭제합니다.
    """
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def redis_client():
    """
    Redis 클라이언트 mock

    SET NX는 기본적으로 성공(True)하고, 락 해제 스크립트는 1을 반환합니다.
    """
    client = MagicMock()
    client.set.return_value = True
    client.eval.return_value = 1
    return client


@pytest.fixture
def make_response():
    """requests.Response 대역을 만드는 팩토리 픽스처"""

    def _make(status_code=200, json_data=None, headers=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.json.return_value = json_data if json_data is not None else {}
        response.headers = headers or {}
        response.text = text
        return response

    return _make


@pytest.fixture(scope="function")
def shopify_session():
    """Shopify HTTP 세션 mock (session.request 응답을 테스트에서 지정)"""
    return MagicMock()


@pytest.fixture(scope="function")
def shopify_client(settings, shopify_session):
    return ShopifyClient(settings, session=shopify_session)


@pytest.fixture(scope="function")
def test_client(test_db, settings, redis_client, shopify_client):
    """DB, 설정, Redis, Shopify 의존성을 테스트용으로 교체한 TestClient"""

    def override_get_db():
        try:
            yield test_db
        except Exception:
            test_db.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_redis_client] = lambda: redis_client
    app.dependency_overrides[get_shopify_client] = lambda: shopify_client

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def admin_user(test_db) -> User:
    """로그인 가능한 admin 계정"""
    user = User(
        email=ADMIN_EMAIL,
        password=hash_password(ADMIN_PASSWORD),
        name="Admin",
        role="admin",
        status="active",
        modules=[],
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture(scope="function")
def auth_headers(test_client, admin_user) -> dict:
    """admin 계정으로 로그인한 Authorization 헤더"""
    response = test_client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
