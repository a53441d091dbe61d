"""
애플리케이션 설정 관리

Pydantic Settings를 사용하여 환경 변수를 로드합니다.
.env 파일 또는 시스템 환경 변수에서 설정을 읽어옵니다.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

# 설정되지 않은 것으로 취급하는 Shopify 자격 증명 예시 값
SHOPIFY_PLACEHOLDER_DOMAIN = "your-store.myshopify.com"
SHOPIFY_PLACEHOLDER_TOKEN = "your-admin-api-access-token"


class Settings(BaseSettings):
    """애플리케이션 설정 클래스"""

    # 데이터베이스 설정 (MySQL, pymysql 드라이버)
    database_url: str = "mysql+pymysql://root:@localhost:3306/mydb2"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_recycle: int = 3600

    # JWT 설정
    jwt_secret_key: str = "dev-secret-key-change-me"
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = 720

    # Redis 설정 (상품 동기화 락)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: str = ""
    sync_lock_timeout_seconds: int = 600

    # Shopify Admin API 설정
    shopify_store_domain: str = ""
    shopify_access_token: str = ""
    shopify_api_version: str = "2024-01"
    shopify_timeout_seconds: int = 30

    # 애플리케이션 설정
    app_env: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 정의되지 않은 환경 변수 무시
    )

    @property
    def redis_url(self) -> str:
        """
        Redis 연결 URL 생성

        비밀번호가 있는 경우: redis://:password@host:port/db
        비밀번호가 없는 경우: redis://host:port/db
        """
        if self.redis_password:
            return f"redis://:{self.redis_password}@{self.redis_host}:{self.redis_port}/{self.redis_db}"
        return f"redis://{self.redis_host}:{self.redis_port}/{self.redis_db}"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def shopify_configured(self) -> bool:
        """
        Shopify 자격 증명이 실제 값으로 설정되어 있는지 확인

        비어 있거나 .env 예시 값이 그대로 남아 있으면 False
        """
        if not self.shopify_store_domain or not self.shopify_access_token:
            return False
        if self.shopify_store_domain == SHOPIFY_PLACEHOLDER_DOMAIN:
            return False
        if self.shopify_access_token == SHOPIFY_PLACEHOLDER_TOKEN:
            return False
        return True


def get_settings() -> Settings:
    """
    Settings 인스턴스를 반환하는 팩토리 함수
    """
    return Settings()
