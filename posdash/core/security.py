"""
보안 관련 유틸리티 함수

비밀번호 해싱 및 JWT 토큰 생성/검증 기능을 제공합니다.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import bcrypt
import jwt

from posdash.core.config import Settings


def normalize_email(email: str) -> str:
    """이메일을 저장/조회용으로 정규화합니다 (앞뒤 공백 제거 + 소문자)."""
    return email.strip().lower()


def hash_password(password: str) -> str:
    """
    비밀번호를 bcrypt로 해싱합니다.

    Args:
        password: 해싱할 평문 비밀번호

    Returns:
        str: bcrypt로 해싱된 비밀번호 (salt 포함)

    Example:
        >>> hashed = hash_password("my_password")
        >>> hashed.startswith("$2b$")
        True
    """
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)

    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    평문 비밀번호와 해시된 비밀번호를 비교하여 검증합니다.

    bcryptjs로 생성된 기존 해시($2a$)도 그대로 검증됩니다.
    해시 형식이 잘못된 경우 False를 반환합니다.

    Args:
        plain_password: 검증할 평문 비밀번호
        hashed_password: 저장된 해시된 비밀번호

    Returns:
        bool: 비밀번호가 일치하면 True, 그렇지 않으면 False
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # 해시가 아닌 값이 저장된 경우 (Invalid salt)
        return False


def create_access_token(data: Dict[str, Any], settings: Settings) -> str:
    """
    JWT 액세스 토큰을 생성합니다.

    Args:
        data: 토큰에 포함할 페이로드 데이터 (예: {"sub": "admin@shop.pk", "user_id": 1})
        settings: 애플리케이션 설정 (JWT 시크릿 키, 알고리즘, 만료 시간 포함)

    Returns:
        str: 생성된 JWT 토큰 문자열
    """
    # 페이로드 복사본 생성 (원본 데이터 보존)
    payload = data.copy()

    now = datetime.now(timezone.utc)
    payload.update(
        {"iat": now, "exp": now + timedelta(minutes=settings.jwt_expiration_minutes)}
    )

    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    JWT 액세스 토큰을 검증하고 페이로드를 반환합니다.

    Raises:
        jwt.ExpiredSignatureError: 토큰이 만료된 경우
        jwt.InvalidTokenError: 토큰이 유효하지 않은 경우 (잘못된 서명, 형식 등)
    """
    return jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )
