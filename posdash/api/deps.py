"""
FastAPI 의존성 주입 함수들

데이터베이스 세션, 설정, 인증, Shopify 클라이언트 의존성을 제공합니다.
"""

from typing import Generator

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from posdash.core.config import Settings, get_settings
from posdash.db.database import get_db
from posdash.integrations.shopify import ShopifyClient
from posdash.services.auth_service import AuthService
from posdash.models.user import User
from posdash.core.exceptions import InvalidCredentialsException, UserNotFoundException

__all__ = ["get_db", "get_current_user", "get_shopify_client", "oauth2_scheme"]

# tokenUrl은 토큰을 얻기 위한 엔드포인트 경로
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    JWT 토큰으로 현재 인증된 사용자를 조회하는 의존성 함수

    Raises:
        HTTPException: 인증 실패 시 401 Unauthorized

    Example:
        @router.get("/protected")
        def protected_route(current_user: User = Depends(get_current_user)):
            return {"user": current_user.email}
    """
    try:
        return AuthService.get_current_user(token, db, settings)

    except (InvalidCredentialsException, UserNotFoundException) as e:
        # 토큰이 유효하지 않거나, 토큰은 유효하지만 사용자가 없는 경우
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_shopify_client(
    settings: Settings = Depends(get_settings),
) -> Generator[ShopifyClient, None, None]:
    """요청 단위 Shopify 클라이언트 (HTTP 세션은 요청 종료 시 닫힘)"""
    client = ShopifyClient(settings)
    try:
        yield client
    finally:
        client.session.close()
