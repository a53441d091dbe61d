"""
인증 서비스

이메일 로그인과 토큰 기반 사용자 조회 기능을 제공합니다.
"""

import logging

import jwt
from sqlalchemy.orm import Session

from posdash.core.config import Settings
from posdash.core.security import normalize_email, verify_password, verify_access_token
from posdash.core.exceptions import InvalidCredentialsException, UserNotFoundException
from posdash.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스 클래스"""

    @staticmethod
    def authenticate_user(email: str, password: str, db: Session) -> User | None:
        """
        사용자 인증을 수행합니다.

        이메일은 정규화 후 조회하며, status가 active가 아닌 계정은 거부합니다.

        Args:
            email: 로그인 이메일
            password: 평문 비밀번호
            db: 데이터베이스 세션

        Returns:
            User | None: 인증 성공 시 User 객체, 실패 시 None

        Example:
            >>> user = AuthService.authenticate_user("Admin@Shop.pk ", "secret123", db)
            >>> user.email if user else None
            'admin@shop.pk'
        """
        user: User | None = (
            db.query(User).filter(User.email == normalize_email(email)).first()
        )
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        if user.status != "active":
            logger.info("Login refused for inactive user %s", user.email)
            return None
        return user

    @staticmethod
    def get_current_user(token: str, db: Session, settings: Settings) -> User:
        """
        JWT 토큰에서 현재 사용자를 조회합니다.

        Raises:
            InvalidCredentialsException: 토큰이 유효하지 않거나 만료된 경우
            UserNotFoundException: 토큰은 유효하지만 사용자가 없는 경우
        """
        try:
            payload = verify_access_token(token, settings)
        except jwt.ExpiredSignatureError:
            raise InvalidCredentialsException("Token has expired")
        except jwt.InvalidTokenError:
            # 잘못된 서명, 형식 등
            raise InvalidCredentialsException("Invalid token")

        # sub 클레임 = 이메일
        email = payload.get("sub")
        if not email:
            raise InvalidCredentialsException("Token payload missing 'sub' claim")
        user = db.query(User).filter(User.email == email).first()
        if not user:
            raise UserNotFoundException(email)

        return user
